# Standard library imports
from typing import Any, Dict

# External package imports
from fastapi import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult

# Local application imports
from .context import get_context
from .errors import format_error
from .schema import schema


class UserHubGraphQLRouter(GraphQLRouter):
    """GraphQL router whose error entries follow the ``{message, code}`` contract"""

    async def process_result(self, request: Request, result: ExecutionResult) -> Dict[str, Any]:
        data: Dict[str, Any] = {"data": result.data}
        if result.errors:
            data["errors"] = [format_error(error) for error in result.errors]
        return data


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router serving the user queries and mutations

    Returns:
        Router to mount on the FastAPI application
    """
    return UserHubGraphQLRouter(schema, context_getter=get_context)
