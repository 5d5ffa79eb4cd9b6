# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import InvalidCredentialsError, NotFoundError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with the signed token and the user's id

        Raises:
            NotFoundError: If no user is registered with the email
            InvalidCredentialsError: If the password does not match
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise NotFoundError("A user with this email could not be found.")

        if not verify_password(request.password, user.hashed_password):
            raise InvalidCredentialsError()

        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })

        return TokenResponse(token=token, user_id=user.id or "")
