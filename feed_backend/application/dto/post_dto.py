from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    title: str
    content: str
    image_url: str = ""


class PostUpdateRequest(BaseModel):
    """DTO for post update request"""
    title: str
    content: str
    image_url: str = ""


class CreatorResponse(BaseModel):
    id: str
    name: str


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    title: str
    content: str
    image_url: str
    creator: CreatorResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostListResponse(BaseModel):
    total_items: int = 0
    posts: List[PostResponse] = Field(default_factory=list)


class ImageUploadResponse(BaseModel):
    image_url: str
