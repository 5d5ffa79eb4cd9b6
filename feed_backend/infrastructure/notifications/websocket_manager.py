"""WebSocket Manager for managing feed subscribers and broadcasting post events"""

import asyncio
import json
import logging
from typing import Any, Dict, Set

from fastapi import WebSocket

from .broadcast_transport import BroadcastTransport

logger = logging.getLogger(__name__)


class WebSocketManager(BroadcastTransport):
    """
    Keeps the set of connected feed sockets and broadcasts messages to all of them.

    Subscribers are anonymous: every connected client receives every post event.
    """

    def __init__(self):
        """Initialize WebSocket manager"""
        self._connections: Set[WebSocket] = set()
        self._lock = asyncio.Lock()
        logger.info("WebSocketManager initialized")

    async def add_connection(self, websocket: WebSocket) -> None:
        """
        Register an accepted WebSocket connection.

        Args:
            websocket: WebSocket connection instance
        """
        async with self._lock:
            self._connections.add(websocket)

        logger.info(f"Added WebSocket connection. Total connections: {self.get_total_connections()}")

    async def remove_connection(self, websocket: WebSocket) -> None:
        """
        Remove a WebSocket connection.

        Args:
            websocket: WebSocket connection instance
        """
        async with self._lock:
            self._connections.discard(websocket)

        logger.info(f"Removed WebSocket connection. Total connections: {self.get_total_connections()}")

    async def broadcast(self, topic: str, payload: Dict[str, Any]) -> int:
        """
        Send ``{"topic": topic, **payload}`` to every connected client.

        Args:
            topic: Channel name, e.g. "posts"
            payload: Message body (will be JSON serialized)

        Returns:
            Number of connections the message was successfully sent to
        """
        async with self._lock:
            connections = list(self._connections)

        if not connections:
            logger.debug(f"No subscribers for topic {topic}")
            return 0

        try:
            message_json = json.dumps({"topic": topic, **payload}, default=str)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message to JSON: {e}")
            return 0

        sent_count = 0
        disconnected_connections = []

        for websocket in connections:
            try:
                await websocket.send_text(message_json)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send {topic} message to a subscriber: {e}")
                disconnected_connections.append(websocket)

        if disconnected_connections:
            async with self._lock:
                for websocket in disconnected_connections:
                    self._connections.discard(websocket)

        logger.debug(f"Broadcast {topic} message to {sent_count}/{len(connections)} connections")
        return sent_count

    def get_total_connections(self) -> int:
        """
        Get total number of active WebSocket connections.

        Returns:
            Total number of connections
        """
        return len(self._connections)
