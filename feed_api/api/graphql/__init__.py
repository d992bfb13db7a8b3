from .router import FeedGraphQLRouter, create_graphql_router, format_graphql_error
from .schema import schema

__all__ = ["FeedGraphQLRouter", "create_graphql_router", "format_graphql_error", "schema"]
