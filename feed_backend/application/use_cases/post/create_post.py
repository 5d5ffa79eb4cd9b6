# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.event_publisher import EventPublisher
from ....domain.models.auth_context import AuthContext
from ....domain.models.post import Post
from ....domain.models.post_event import PostEvent
from ....domain.constants import PostActions
from ....domain.exceptions import StoreError, UnauthenticatedError
from ...validators import collect_post_errors, raise_if_invalid
from ...dto.post_dto import PostCreateRequest, PostResponse
from .post_response import build_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a post owned by the caller"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.event_publisher = event_publisher

    async def execute(self, auth_context: AuthContext, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post and attach it to its creator

        Args:
            auth_context: Caller identity from token verification
            request: Post creation request

        Returns:
            PostResponse with the stored post and its creator

        Raises:
            UnauthenticatedError: If the caller has no identity or the user is gone
            ValidationError: With every invalid field
            StoreError: If either write fails; a half-done creation is rolled back
        """
        if not auth_context.is_auth or not auth_context.user_id:
            raise UnauthenticatedError()

        raise_if_invalid(collect_post_errors(request.title, request.content, request.image_url))

        user = await self.user_repository.find_by_id(auth_context.user_id)
        if user is None:
            raise UnauthenticatedError("Invalid user.")

        saved_post = await self.post_repository.save(
            Post(
                id=None,
                title=request.title,
                content=request.content,
                image_url=request.image_url,
                creator_id=auth_context.user_id,
            )
        )

        try:
            await self.user_repository.add_post(auth_context.user_id, saved_post.id or "")
        except StoreError:
            logger.error(
                f"Failed to attach post {saved_post.id} to user {auth_context.user_id}; rolling back",
                exc_info=True,
            )
            await self.post_repository.delete(saved_post.id or "")
            raise

        response = build_post_response(saved_post, user)
        self.event_publisher.publish(
            PostEvent(action=PostActions.CREATE, post=response.model_dump(mode="json"))
        )
        logger.info(f"Created post {saved_post.id} for user {auth_context.user_id}")
        return response
