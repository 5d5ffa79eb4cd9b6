from abc import ABC, abstractmethod


class AssetStore(ABC):
    """Contract for storing post images outside the database"""

    @abstractmethod
    async def store(self, data: bytes, filename: str) -> str:
        """Persist the bytes and return a reference usable as a post image_url"""
        pass

    @abstractmethod
    async def delete(self, reference: str) -> None:
        """Delete a stored asset. Failures are logged, never raised."""
        pass
