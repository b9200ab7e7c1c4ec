"""
Boundary between domain results and GraphQL errors.

``unwrap`` turns an ``Err`` into a ``UserOperationError`` so the transport
reports it; ``format_error`` renders every GraphQL error as ``{message, code}``
and hides anything that is not a domain error.
"""

# Standard library imports
from typing import Dict, TypeVar

# External package imports
from graphql import GraphQLError

# Local application imports
from ...domain.errors import DuplicateError, UserError, ValidationError
from ...domain.results import Err, Ok, Result

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."
INTERNAL_ERROR_CODE = "INTERNAL_SERVER_ERROR"


class UserOperationError(Exception):
    """Carries a domain error through the GraphQL execution machinery"""

    def __init__(self, error: UserError) -> None:
        super().__init__(error.message)
        self.error = error


def unwrap(result: Result[T]) -> T:
    """
    Return the value of an Ok result or raise for an Err result

    Raises:
        UserOperationError: If the result is an Err
    """
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise UserOperationError(result.error)
    raise TypeError(f"Unexpected result type: {type(result).__name__}")


def format_error(error: GraphQLError) -> Dict[str, str]:
    """
    Render a GraphQL error in the wire shape ``{message, code}``

    Only ValidationError and DuplicateError keep their own message and code;
    everything else becomes a generic internal error.
    """
    original = error.original_error
    if isinstance(original, UserOperationError) and isinstance(
        original.error, (ValidationError, DuplicateError)
    ):
        return {"message": original.error.message, "code": original.error.code}
    return {"message": INTERNAL_ERROR_MESSAGE, "code": INTERNAL_ERROR_CODE}
