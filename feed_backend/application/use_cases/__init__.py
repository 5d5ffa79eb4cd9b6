from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    VerifyTokenUseCase,
    GetUserStatusUseCase,
    UpdateUserStatusUseCase,
)
from .post import (
    ListPostsUseCase,
    GetPostUseCase,
    CreatePostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "VerifyTokenUseCase",
    "GetUserStatusUseCase",
    "UpdateUserStatusUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
