# External package imports
from fastapi import Depends
from strawberry.fastapi import BaseContext

# Local application imports
from ...di.base_container import BaseContainer
from ...domain.models.auth import AuthResult
from ..rest.dependencies import get_auth_result, get_container


class GraphQLContext(BaseContext):
    """Per-request GraphQL context carrying the DI container and the caller's AuthResult"""

    def __init__(self, container: BaseContainer, auth: AuthResult) -> None:
        super().__init__()
        self.container = container
        self.auth = auth


async def get_graphql_context(
    container: BaseContainer = Depends(get_container),
    auth: AuthResult = Depends(get_auth_result),
) -> GraphQLContext:
    return GraphQLContext(container=container, auth=auth)
