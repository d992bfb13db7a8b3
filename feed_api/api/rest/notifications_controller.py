"""WebSocket endpoint broadcasting post changes to connected clients"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect

from ...application.services.auth_gate import AuthGate
from ...di.base_container import BaseContainer
from ...infrastructure.notifications import WebSocketManager
from .dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.websocket("/ws")
async def websocket_notifications(
    websocket: WebSocket,
    token: Optional[str] = Query(None, description="Optional JWT access token"),
    container: BaseContainer = Depends(get_container),
):
    """
    WebSocket endpoint for receiving post change notifications.

    Every connected client receives `{"type": "posts", "action": ..., "post": ...}`
    messages. A token is optional; a token that is sent but invalid is rejected.

    Example connection:
        ws://host/ws?token=<jwt_token>

    Args:
        websocket: WebSocket connection instance
        token: JWT access token (query parameter)
    """
    manager: WebSocketManager = container.get(WebSocketManager)

    user_id = None
    if token:
        auth = container.get(AuthGate).resolve_token(token)
        if not auth.is_authenticated:
            await websocket.close(code=1008, reason="Invalid or expired token")
            return
        user_id = auth.user_id

    await websocket.accept()
    client = user_id or "anonymous client"
    logger.info(f"WebSocket connection accepted for {client}")

    try:
        await manager.add_connection(websocket, user_id)

        await websocket.send_json({
            "type": "connection_established",
            "message": "Connected to feed notifications",
            "userId": user_id,
        })

        # Keep connection alive and answer keep-alive pings
        while True:
            try:
                message = await websocket.receive_text()

                if message == "ping":
                    await websocket.send_text("pong")
                elif message != "pong":
                    logger.debug(f"Received message from {client}: {message}")

            except WebSocketDisconnect:
                logger.info(f"WebSocket disconnected for {client}")
                break

    except Exception as e:
        logger.error(f"Error in WebSocket connection for {client}: {e}", exc_info=True)
    finally:
        await manager.remove_connection(websocket, user_id)
