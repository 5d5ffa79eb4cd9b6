# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError
from ....core.security import hash_password
from ...validators import collect_registration_errors, raise_if_invalid
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: With every invalid field (email, name, password)
            ConflictError: If user with email already exists
        """
        raise_if_invalid(
            collect_registration_errors(request.email, request.name, request.password)
        )

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User with this email already exists")

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name.strip(),
            email=request.email,
            hashed_password=hash_password(request.password),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return UserResponse(
            id=saved_user.id or "",
            name=saved_user.name,
            email=saved_user.email,
            status=saved_user.status,
        )
