from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, UserStatusResponse, UserStatusUpdateRequest
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    CreatorResponse,
    PostResponse,
    PostListResponse,
    ImageUploadResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "UserStatusResponse",
    "UserStatusUpdateRequest",
    "PostCreateRequest",
    "PostUpdateRequest",
    "CreatorResponse",
    "PostResponse",
    "PostListResponse",
    "ImageUploadResponse",
]
