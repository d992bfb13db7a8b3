"""Notifier implementation that fans events out over WebSockets"""

import logging
from typing import Any, Dict

from ...domain.ports.notifier import Notifier
from ...utils.task_tracker import TaskTracker
from .websocket_manager import WebSocketManager

logger = logging.getLogger(__name__)


class WebSocketNotifier(Notifier):
    """
    Publishes `{"type": <event>, **payload}` to every connected client.

    publish() only schedules the broadcast: callers never wait for delivery,
    and delivery errors end up in the log.
    """

    def __init__(self, websocket_manager: WebSocketManager) -> None:
        self.websocket_manager = websocket_manager
        self.tasks = TaskTracker("notifier")

    def publish(self, event_name: str, payload: Dict[str, Any]) -> None:
        message = {"type": event_name, **payload}
        self.tasks.spawn(
            self.websocket_manager.broadcast(message),
            f"broadcast {event_name}:{payload.get('action', '')}",
        )
        logger.debug(f"Scheduled '{event_name}' broadcast")
