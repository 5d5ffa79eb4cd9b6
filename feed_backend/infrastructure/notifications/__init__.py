"""Notifications infrastructure for realtime post events"""

from .broadcast_transport import BroadcastTransport
from .websocket_manager import WebSocketManager
from .realtime_publisher import RealtimePublisher

__all__ = [
    "BroadcastTransport",
    "WebSocketManager",
    "RealtimePublisher",
]
