from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update). Raises ConflictError on duplicate email."""
        pass

    @abstractmethod
    async def add_post(self, user_id: str, post_id: str) -> bool:
        """Append a post id to the user's posts list (at most once)"""
        pass

    @abstractmethod
    async def remove_post(self, user_id: str, post_id: str) -> bool:
        """Remove a post id from the user's posts list"""
        pass
