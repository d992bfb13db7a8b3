from typing import TYPE_CHECKING
from ...core.security import TokenService
from ...application.services.auth_gate import AuthGate
from ...domain.ports.image_store import ImageStore
from ...domain.ports.notifier import Notifier
from ...infrastructure.notifications import WebSocketManager

if TYPE_CHECKING:
    from ..app_context import AppContext
    from ..base_container import BaseContainer


class ServiceProvider:
    """Registers the shared services owned by the AppContext"""

    @staticmethod
    def register(container: "BaseContainer", context: "AppContext") -> None:
        container.register_singleton(TokenService, context.token_service)
        container.register_singleton(AuthGate, AuthGate(context.token_service))
        container.register_singleton(WebSocketManager, context.websocket_manager)
        container.register_singleton(Notifier, context.notifier)
        container.register_singleton(ImageStore, context.image_store)
