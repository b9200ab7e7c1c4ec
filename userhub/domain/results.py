"""
Closed result type returned by validation, lookup and persistence steps.

Every step yields either ``Ok(value)`` or ``Err(error)``; a pipeline stops at
the first ``Err``. Callers branch with ``isinstance`` on the two variants.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

# Local application imports
from .errors import UserError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful step carrying its value."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failed step carrying a domain error."""
    error: UserError


Result = Union[Ok[T], Err]


OK_NONE: Ok[None] = Ok(None)
