from .app_context import AppContext
from .base_container import BaseContainer
from .container import DIContainer

__all__ = [
    "AppContext",
    "BaseContainer",
    "DIContainer",
]
