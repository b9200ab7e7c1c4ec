"""
Validation rules for user payloads.

Pure functions: no I/O and no logging. Each rule returns ``Ok(None)`` when it
passes or ``Err(ValidationError)`` for the first failing check, in the order
presence → age → email format → contact number format.
"""

# Standard library imports
import re
from typing import Any, Optional

# Local application imports
from .errors import (
    AGE_TOO_LOW,
    ALL_FIELDS_REQUIRED,
    INVALID_CONTACT_NUMBER,
    INVALID_EMAIL,
    USER_ID_REQUIRED,
    ValidationError,
)
from .results import OK_NONE, Err, Result


MINIMUM_AGE = 18

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
CONTACT_NUMBER_PATTERN = re.compile(r"(?:09|\+639)[0-9]{9}")


def is_valid_email(email: str) -> bool:
    """Whole-string match against the ``local@domain.tld`` shape."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_contact_number(contact_number: str) -> bool:
    """Whole-string match: ``09`` or ``+639`` followed by nine digits."""
    return CONTACT_NUMBER_PATTERN.fullmatch(contact_number) is not None


def _check_formats(
    age: Optional[int],
    email: Optional[str],
    contact_number: Optional[str],
) -> Result[None]:
    # Falsy values count as "not supplied" and are skipped
    if age and age < MINIMUM_AGE:
        return Err(ValidationError(AGE_TOO_LOW))
    if email and not is_valid_email(email):
        return Err(ValidationError(INVALID_EMAIL))
    if contact_number and not is_valid_contact_number(contact_number):
        return Err(ValidationError(INVALID_CONTACT_NUMBER))
    return OK_NONE


def validate_new_user(
    full_name: Any,
    age: Any,
    address: Any,
    email: Any,
    contact_number: Any,
    username: Any,
    password: Any,
) -> Result[None]:
    """
    Validate a complete payload for user creation

    Every field is required and must be truthy, so ``age=0`` or an empty
    string is reported as missing rather than as out of range.

    Returns:
        Ok(None) if valid, otherwise Err with the first failing rule
    """
    required = (full_name, age, address, email, contact_number, username, password)
    if not all(required):
        return Err(ValidationError(ALL_FIELDS_REQUIRED))
    return _check_formats(age, email, contact_number)


def validate_user_changes(
    age: Optional[int] = None,
    email: Optional[str] = None,
    contact_number: Optional[str] = None,
) -> Result[None]:
    """
    Validate the supplied fields of a partial update

    Only fields that are present and truthy are checked; the rest are left
    to keep their stored values.
    """
    return _check_formats(age, email, contact_number)


def validate_user_id(user_id: Optional[str]) -> Result[None]:
    """Update and delete both need a non-empty user id."""
    if not user_id:
        return Err(ValidationError(USER_ID_REQUIRED))
    return OK_NONE
