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

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post together with its image"""

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

    async def execute(self, auth_context: AuthContext, post_id: str) -> None:
        """
        Delete a post

        Raises:
            UnauthenticatedError: If the caller has no identity
            NotFoundError: If post not found
            ForbiddenError: If the caller is not the post's creator
        """
        if not auth_context.is_auth or not auth_context.user_id:
            raise UnauthenticatedError()

        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Could not find post.")

        if not post.is_owned_by(auth_context.user_id):
            raise ForbiddenError()

        await self.asset_store.delete(post.image_url)
        await self.post_repository.delete(post_id)
        await self.user_repository.remove_post(post.creator_id, post_id)

        self.event_publisher.publish(PostEvent(action=PostActions.DELETE, post=post_id))
        logger.info(f"Deleted post {post_id}")
