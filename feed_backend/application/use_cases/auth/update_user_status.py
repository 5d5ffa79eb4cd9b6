# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.auth_context import AuthContext
from ....domain.exceptions import NotFoundError, UnauthenticatedError
from ...dto.user_dto import UserStatusResponse, UserStatusUpdateRequest

logger = logging.getLogger(__name__)


class UpdateUserStatusUseCase:
    """Use case for replacing the authenticated user's status text"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        auth_context: AuthContext,
        request: UserStatusUpdateRequest,
    ) -> UserStatusResponse:
        """
        Update the caller's status

        Raises:
            UnauthenticatedError: If the caller has no identity
            NotFoundError: If the caller's user record no longer exists
        """
        if not auth_context.is_auth or not auth_context.user_id:
            raise UnauthenticatedError()

        user = await self.user_repository.find_by_id(auth_context.user_id)
        if user is None:
            raise NotFoundError("User not found")

        user.status = request.status
        saved_user = await self.user_repository.save(user)
        logger.info(f"Updated status for user {saved_user.id}")

        return UserStatusResponse(status=saved_user.status)
