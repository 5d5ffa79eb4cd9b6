from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .create_post import CreatePostUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase

__all__ = [
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
