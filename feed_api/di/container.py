# Local application imports
from .app_context import AppContext
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    PostProvider,
    RepositoryProvider,
    ServiceProvider,
    UploadProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider) - from the opened AppContext
    2. Repositories (RepositoryProvider) - depends on collections
    3. Shared services (ServiceProvider) - token service, auth gate, notifier, image store
    4. Use cases (AuthProvider, PostProvider, UploadProvider)
    """

    def __init__(self, context: AppContext) -> None:
        super().__init__()
        self.context = context
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        DatabaseProvider.register(self, self.context)
        RepositoryProvider.register(self)
        ServiceProvider.register(self, self.context)

        AuthProvider.register(self)
        PostProvider.register(self)
        UploadProvider.register(self)
