# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.auth_context import AuthContext
from ....domain.exceptions import NotFoundError, UnauthenticatedError
from ...dto.user_dto import UserStatusResponse


class GetUserStatusUseCase:
    """Use case for reading the authenticated user's status"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, auth_context: AuthContext) -> UserStatusResponse:
        if not auth_context.is_auth or not auth_context.user_id:
            raise UnauthenticatedError()

        user = await self.user_repository.find_by_id(auth_context.user_id)
        if user is None:
            raise NotFoundError("User not found")

        return UserStatusResponse(status=user.status)
