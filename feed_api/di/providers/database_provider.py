from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..app_context import AppContext
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB collections"""

    @staticmethod
    def register(container: "BaseContainer", context: "AppContext") -> None:
        """
        Register the database and its collections as singletons.
        The connection itself is owned by the AppContext.
        """
        container.register_singleton("database", context.mongo.database)
        container.register_singleton("user_collection", context.mongo.get_user_collection())
        container.register_singleton("post_collection", context.mongo.get_post_collection())
