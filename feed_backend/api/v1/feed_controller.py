"""
Feed API: paginated post listing, post CRUD and image upload.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
from typing import Dict

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.post_dto import (
    ImageUploadResponse,
    PostCreateRequest,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...core.config import get_settings
from ...di.container import get_container
from ...domain.exceptions import UnauthenticatedError
from ...domain.models.auth_context import AuthContext
from ...domain.services.asset_store import AssetStore

from .dependencies import get_auth_context

# -----------------------------------------------------------------------------
# Logging and router
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)
router = APIRouter(tags=["feed"])


@router.get("/posts", response_model=PostListResponse)
async def list_posts(page: int = Query(1, ge=1)) -> PostListResponse:
    """List one page of posts, newest first. No authentication required."""
    container = get_container()
    return await container.get(ListPostsUseCase).execute(page=page)


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    auth_context: AuthContext = Depends(get_auth_context),
) -> PostResponse:
    container = get_container()
    return await container.get(CreatePostUseCase).execute(auth_context, request)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    container = get_container()
    return await container.get(GetPostUseCase).execute(post_id)


@router.put("/posts/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    auth_context: AuthContext = Depends(get_auth_context),
) -> PostResponse:
    container = get_container()
    return await container.get(UpdatePostUseCase).execute(auth_context, post_id, request)


@router.delete("/posts/{post_id}")
async def delete_post(
    post_id: str,
    auth_context: AuthContext = Depends(get_auth_context),
) -> Dict[str, str]:
    container = get_container()
    await container.get(DeletePostUseCase).execute(auth_context, post_id)
    return {"message": "Deleted post."}


@router.post("/images", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    image: UploadFile = File(...),
    auth_context: AuthContext = Depends(get_auth_context),
) -> ImageUploadResponse:
    """
    Store an image and return the reference to send as a post's image_url.
    """
    if not auth_context.is_auth:
        raise UnauthenticatedError()

    if not image.filename:
        raise HTTPException(
            status_code=422,
            detail="No image provided.",
        )

    settings = get_settings()
    max_bytes = settings.asset_upload_max_mb * 1024 * 1024
    data = await image.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Max {settings.asset_upload_max_mb} MB.",
        )

    asset_store = get_container().get(AssetStore)
    try:
        image_url = await asset_store.store(data, image.filename)
    except ValueError as exception:
        raise HTTPException(
            status_code=422,
            detail=str(exception),
        )

    logger.info(f"User {auth_context.user_id} uploaded image {image_url}")
    return ImageUploadResponse(image_url=image_url)
