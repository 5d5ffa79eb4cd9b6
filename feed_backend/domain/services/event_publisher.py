from abc import ABC, abstractmethod

from ..models.post_event import PostEvent


class EventPublisher(ABC):
    """Contract for fire-and-forget post event fan-out"""

    @abstractmethod
    def publish(self, event: PostEvent) -> None:
        """Hand the event off for delivery without waiting for subscribers"""
        pass
