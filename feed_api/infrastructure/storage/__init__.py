from .local_image_store import ALLOWED_CONTENT_TYPES, LocalImageStore

__all__ = ["ALLOWED_CONTENT_TYPES", "LocalImageStore"]
