from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.services.asset_store import AssetStore
from ...domain.services.event_publisher import EventPublisher
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all feed use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        per_page = get_settings().posts_per_page

        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                per_page=per_page,
            )
        )

        container.register_factory(
            GetPostUseCase,
            lambda: GetPostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                event_publisher=container.get(EventPublisher),
            )
        )

        container.register_factory(
            UpdatePostUseCase,
            lambda: UpdatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                asset_store=container.get(AssetStore),
                event_publisher=container.get(EventPublisher),
            )
        )

        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                asset_store=container.get(AssetStore),
                event_publisher=container.get(EventPublisher),
            )
        )
