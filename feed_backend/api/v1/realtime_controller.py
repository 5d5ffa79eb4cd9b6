"""Realtime feed endpoint: clients subscribe here to receive post events"""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ...di.container import get_container
from ...infrastructure.notifications import WebSocketManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
async def feed_socket(websocket: WebSocket):
    """
    WebSocket endpoint for post lifecycle events.

    Every connected client receives ``{"topic": "posts", "action": ..., "post": ...}``
    for each post created, updated or deleted after it connected. Anonymous
    subscribers are allowed.

    Example connection:
        ws://host/api/v1/feed/ws
    """
    manager: WebSocketManager = get_container().get(WebSocketManager)

    await websocket.accept()
    await manager.add_connection(websocket)

    try:
        await websocket.send_json({
            "type": "connection_established",
            "message": "Connected to feed",
        })

        # Keep connection alive and answer keep-alive pings
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")
            else:
                logger.debug(f"Ignoring feed socket message: {message}")
    except WebSocketDisconnect:
        logger.info("Feed WebSocket disconnected")
    finally:
        await manager.remove_connection(websocket)
