# Standard library imports
import logging
from pathlib import Path

# External package imports
from pymongo.errors import PyMongoError

# Local application imports
from ..core.config import Settings
from ..core.security import TokenService
from ..infrastructure.db.mongo_connection import MongoConnection
from ..infrastructure.notifications import WebSocketManager, WebSocketNotifier
from ..infrastructure.storage import LocalImageStore

logger = logging.getLogger(__name__)


class AppContext:
    """
    Process-wide resources with an explicit lifecycle.

    Built and opened in the FastAPI lifespan, closed at shutdown. Everything
    that used to be global state (database client, token secret, socket
    registry, image directory) hangs off this object.
    """

    def __init__(self, settings: Settings, base_dir: Path) -> None:
        self.settings = settings
        self.base_dir = Path(base_dir)
        self.mongo = MongoConnection(settings)
        self.token_service = TokenService.from_settings(settings)
        self.websocket_manager = WebSocketManager()
        self.notifier = WebSocketNotifier(self.websocket_manager)
        self.image_store = LocalImageStore(self.base_dir, settings.image_upload_dir)

    async def open(self) -> "AppContext":
        self.mongo.open()
        self.image_store.ensure_directory()
        try:
            await self.mongo.ensure_indexes()
            logger.info("MongoDB indexes ensured")
        except PyMongoError as e:
            # Don't fail app startup if MongoDB is unreachable; requests will report it
            logger.error(f"Failed to ensure MongoDB indexes: {e}")
        return self

    async def close(self) -> None:
        await self.notifier.tasks.drain()
        await self.image_store.drain()
        self.mongo.close()
        logger.info("Application context closed")
