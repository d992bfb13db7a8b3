"""Notifications infrastructure for real-time post updates"""

from .websocket_manager import WebSocketManager
from .websocket_notifier import WebSocketNotifier

__all__ = [
    "WebSocketManager",
    "WebSocketNotifier",
]
