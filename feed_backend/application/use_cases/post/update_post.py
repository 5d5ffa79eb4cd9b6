# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.asset_store import AssetStore
from ....domain.services.event_publisher import EventPublisher
from ....domain.models.auth_context import AuthContext
from ....domain.models.post_event import PostEvent
from ....domain.constants import PostActions
from ....domain.exceptions import ForbiddenError, NotFoundError, UnauthenticatedError
from ...validators import collect_post_errors, raise_if_invalid
from ...dto.post_dto import PostResponse, PostUpdateRequest
from .post_response import build_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for editing a post. Only its creator may do so."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        asset_store: AssetStore,
        event_publisher: EventPublisher,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.asset_store = asset_store
        self.event_publisher = event_publisher

    async def execute(
        self,
        auth_context: AuthContext,
        post_id: str,
        request: PostUpdateRequest,
    ) -> PostResponse:
        """
        Update title, content and image of a post

        Raises:
            UnauthenticatedError: If the caller has no identity
            ValidationError: With every invalid field
            NotFoundError: If post not found
            ForbiddenError: If the caller is not the post's creator
        """
        if not auth_context.is_auth or not auth_context.user_id:
            raise UnauthenticatedError()

        raise_if_invalid(collect_post_errors(request.title, request.content, request.image_url))

        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Could not find post.")

        if not post.is_owned_by(auth_context.user_id):
            raise ForbiddenError()

        if request.image_url != post.image_url:
            await self.asset_store.delete(post.image_url)

        post.title = request.title
        post.content = request.content
        post.image_url = request.image_url
        updated_post = await self.post_repository.save(post)

        creator = await self.user_repository.find_by_id(updated_post.creator_id)
        response = build_post_response(updated_post, creator)
        self.event_publisher.publish(
            PostEvent(action=PostActions.UPDATE, post=response.model_dump(mode="json"))
        )
        logger.info(f"Updated post {post_id}")
        return response
