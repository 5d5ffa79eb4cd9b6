from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post (create or update). Timestamps are assigned by the store."""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID, returning whether a record was removed"""
        pass

    @abstractmethod
    async def list_recent(self, skip: int, limit: int) -> Tuple[int, List[Post]]:
        """List posts newest first, returning (total, items)"""
        pass
