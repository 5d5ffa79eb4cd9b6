# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.

    ``creator_id`` is fixed when the post is created; repositories never
    write it on update.
    """
    id: Optional[str]
    title: str
    content: str
    image_url: str
    creator_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.creator_id:
            raise ValueError("Creator user ID is required")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.creator_id == user_id
