# Standard library imports
from typing import Dict, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.post_dto import PostListResponse
from .post_response import build_post_response

DEFAULT_POSTS_PER_PAGE = 2


class ListPostsUseCase:
    """Use case for reading one page of the feed, newest first"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        per_page: int = DEFAULT_POSTS_PER_PAGE,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.per_page = per_page

    async def execute(self, page: Optional[int] = 1, page_size: Optional[int] = None) -> PostListResponse:
        """
        List posts for a page

        Args:
            page: 1-based page number, defaults to 1. Pages past the end are empty.
            page_size: Posts per page, defaults to the configured page size

        Returns:
            PostListResponse with the total number of posts and the page items
        """
        current_page = page or 1
        limit = page_size or self.per_page
        skip = max(0, (current_page - 1) * limit)

        total, posts = await self.post_repository.list_recent(skip=skip, limit=limit)

        creators: Dict[str, Optional[User]] = {}
        for post in posts:
            if post.creator_id not in creators:
                creators[post.creator_id] = await self.user_repository.find_by_id(post.creator_id)

        return PostListResponse(
            total_items=total,
            posts=[build_post_response(post, creators[post.creator_id]) for post in posts],
        )
