# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse
from .post_response import build_post_response


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str) -> PostResponse:
        """
        Get a post by ID

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Could not find post.")

        creator = await self.user_repository.find_by_id(post.creator_id)
        return build_post_response(post, creator)
