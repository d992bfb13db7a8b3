from .auth_controller import router as auth_router
from .feed_controller import router as feed_router
from .upload_controller import router as upload_router
from .notifications_controller import router as notifications_router
from .errors import register_exception_handlers


__all__ = ["auth_router", "feed_router", "upload_router", "notifications_router", "register_exception_handlers"]
