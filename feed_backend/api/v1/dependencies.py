# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.verify_token import VerifyTokenUseCase
from ...domain.models.auth_context import AuthContext
from ...di.container import get_container


# auto_error=False: a missing or malformed header must not reject the request
security_scheme = HTTPBearer(auto_error=False)


def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> AuthContext:
    """
    FastAPI dependency that softly authenticates the caller

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        AuthContext, anonymous when the token is absent, invalid or expired
    """
    header = f"{credentials.scheme} {credentials.credentials}" if credentials else None

    container = get_container()
    verify_token_use_case = container.get(VerifyTokenUseCase)
    return verify_token_use_case.execute(header)
