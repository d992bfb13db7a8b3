"""WebSocket Manager for managing client connections and broadcasting post changes"""

import json
import logging
from threading import Lock
from typing import Dict, Optional, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)

ANONYMOUS_CLIENT = "anonymous"


class WebSocketManager:
    """
    Manages WebSocket connections and broadcasts messages to every connected client.

    Connections are grouped by user ID; clients that connected without a
    token are grouped under ANONYMOUS_CLIENT.
    """

    def __init__(self):
        """Initialize WebSocket manager"""
        # Map client key -> Set of WebSocket connections
        self._connections: Dict[str, Set[WebSocket]] = {}
        self._lock = Lock()
        logger.info("WebSocketManager initialized")

    async def add_connection(self, websocket: WebSocket, user_id: Optional[str] = None) -> None:
        """
        Register a WebSocket connection.

        Args:
            websocket: WebSocket connection instance
            user_id: Authenticated user owning this connection, if any
        """
        key = user_id or ANONYMOUS_CLIENT
        with self._lock:
            self._connections.setdefault(key, set()).add(websocket)

        logger.info(f"Added WebSocket connection for {key}. Total connections: {self.get_total_connections()}")

    async def remove_connection(self, websocket: WebSocket, user_id: Optional[str] = None) -> None:
        """
        Remove a WebSocket connection.

        Args:
            websocket: WebSocket connection instance
            user_id: Authenticated user owning this connection, if any
        """
        key = user_id or ANONYMOUS_CLIENT
        with self._lock:
            self._discard(key, websocket)

        logger.info(f"Removed WebSocket connection for {key}. Total connections: {self.get_total_connections()}")

    async def broadcast(self, message: dict) -> int:
        """
        Send a message to all connected clients.

        Args:
            message: Message dictionary (will be JSON serialized)

        Returns:
            Number of connections the message was successfully sent to
        """
        with self._lock:
            targets = [(key, ws) for key, sockets in self._connections.items() for ws in sockets]

        if not targets:
            logger.debug("No WebSocket connections to broadcast to")
            return 0

        try:
            message_json = json.dumps(message)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message to JSON: {e}")
            return 0

        sent_count = 0
        disconnected = []
        for key, websocket in targets:
            try:
                await websocket.send_text(message_json)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send message to connection for {key}: {e}")
                disconnected.append((key, websocket))

        if disconnected:
            with self._lock:
                for key, websocket in disconnected:
                    self._discard(key, websocket)

        logger.debug(f"Broadcast sent to {sent_count}/{len(targets)} connections")
        return sent_count

    def _discard(self, key: str, websocket: WebSocket) -> None:
        # Caller holds the lock
        sockets = self._connections.get(key)
        if sockets is None:
            return
        sockets.discard(websocket)
        if not sockets:
            del self._connections[key]

    def get_total_connections(self) -> int:
        """
        Get total number of active WebSocket connections.

        Returns:
            Total number of connections across all clients
        """
        with self._lock:
            return sum(len(connections) for connections in self._connections.values())
