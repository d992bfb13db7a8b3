from .notifier import Notifier, POSTS_CHANNEL
from .image_store import ImageStore

__all__ = ["Notifier", "POSTS_CHANNEL", "ImageStore"]
