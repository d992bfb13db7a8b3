from abc import ABC, abstractmethod
from typing import Any, Dict

POSTS_CHANNEL = "posts"


class Notifier(ABC):
    """Publish/subscribe fan-out of change events to live clients"""

    @abstractmethod
    def publish(self, event_name: str, payload: Dict[str, Any]) -> None:
        """
        Fire-and-forget publish. Must not block the caller and must not
        raise on delivery failure.
        """
        pass
