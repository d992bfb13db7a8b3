# Standard library imports
from typing import Any, Dict

# External package imports
from graphql import GraphQLError
from starlette.requests import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionResult

# Local application imports
from ...core.errors import FeedError
from .context import get_graphql_context
from .schema import schema


def format_graphql_error(error: GraphQLError) -> Dict[str, Any]:
    """
    Format an error raised while executing an operation

    Application errors become `{message, status, data}`; any other exception
    raised by a resolver is reported with status 500. Errors that never reached
    a resolver (syntax, validation) keep the standard GraphQL format.
    """
    original = error.original_error
    if original is None:
        return error.formatted
    if isinstance(original, FeedError):
        return {"message": original.message, "status": original.status_code, "data": original.data}
    return {"message": str(original) or "An error occurred.", "status": 500, "data": None}


class FeedGraphQLRouter(GraphQLRouter):
    async def process_result(self, request: Request, result: ExecutionResult) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}
        if result.errors:
            data["errors"] = [format_graphql_error(error) for error in result.errors]
        if result.extensions:
            data["extensions"] = result.extensions
        return data


def create_graphql_router() -> FeedGraphQLRouter:
    return FeedGraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql",
    )
