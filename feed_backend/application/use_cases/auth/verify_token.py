# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.models.auth_context import AuthContext
from ....domain.constants import UserFields
from ....core.security import decode_jwt_token

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class VerifyTokenUseCase:
    """
    Soft authentication: turns an Authorization header into an AuthContext.

    Never raises. Anything short of a valid, unexpired token yields an
    anonymous context, and the post use cases decide what that caller may do.
    """

    def execute(self, authorization_header: Optional[str]) -> AuthContext:
        token = self._extract_token(authorization_header)
        if token is None:
            return AuthContext.anonymous()

        try:
            payload = decode_jwt_token(token)
        except (ValueError, RuntimeError) as exception:
            logger.debug(f"Token rejected: {exception}")
            return AuthContext.anonymous()

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            logger.debug("Token rejected: missing subject claim")
            return AuthContext.anonymous()

        return AuthContext.authenticated(user_id=user_id, email=payload.get(UserFields.EMAIL))

    @staticmethod
    def _extract_token(authorization_header: Optional[str]) -> Optional[str]:
        if not authorization_header or not isinstance(authorization_header, str):
            return None
        parts = authorization_header.split()
        if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
            return None
        return parts[1]
