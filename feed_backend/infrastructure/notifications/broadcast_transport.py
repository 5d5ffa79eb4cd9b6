from abc import ABC, abstractmethod
from typing import Any, Dict


class BroadcastTransport(ABC):
    """Delivers one message to every current subscriber of a topic"""

    @abstractmethod
    async def broadcast(self, topic: str, payload: Dict[str, Any]) -> int:
        """Send the payload and return how many subscribers received it"""
        pass
