"""
Domain error taxonomy for user operations.

Errors are plain values, not exceptions: validation and persistence steps
return them inside an ``Err`` result, and only the API boundary turns them
into transport errors. Each kind carries a human-readable ``message`` and a
stable machine-readable ``code``.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Any, ClassVar, Union


VALIDATION_ERROR_CODE = "VALIDATION_ERROR"
DUPLICATE_ERROR_CODE = "DUPLICATE_ERROR"


@dataclass(frozen=True)
class ValidationError:
    """Malformed input or a missing record."""
    message: str
    code: ClassVar[str] = VALIDATION_ERROR_CODE


@dataclass(frozen=True)
class DuplicateError:
    """A unique field (email or username) collides with an existing user."""
    field: str
    value: Any
    code: ClassVar[str] = DUPLICATE_ERROR_CODE

    @property
    def message(self) -> str:
        return f'{self.field} "{self.value}" already exists.'


UserError = Union[ValidationError, DuplicateError]


# Messages shared by validation and the use cases
ALL_FIELDS_REQUIRED = "All fields are required."
AGE_TOO_LOW = "Age must be 18 or older."
INVALID_EMAIL = "Invalid email format."
INVALID_CONTACT_NUMBER = "Invalid contact number format."
USER_ID_REQUIRED = "User ID is required."
USER_NOT_FOUND = "User not found."
