# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.post import Post
from ....domain.models.user import User
from ....utils.datetime_utils import ensure_utc
from ...dto.post_dto import CreatorResponse, PostResponse


def build_post_response(post: Post, creator: Optional[User]) -> PostResponse:
    """Convert a post and its (possibly deleted) creator into the outward DTO"""
    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        image_url=post.image_url,
        creator=CreatorResponse(
            id=post.creator_id,
            name=creator.name if creator is not None else "",
        ),
        created_at=ensure_utc(post.created_at),
        updated_at=ensure_utc(post.updated_at),
    )
