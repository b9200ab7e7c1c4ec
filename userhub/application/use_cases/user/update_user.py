# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....domain.models.user import User
from ....domain.models.rate_usage import RateUsage
from ....domain.errors import USER_NOT_FOUND, ValidationError
from ....domain.results import Err, Result
from ....domain.validation import validate_user_changes, validate_user_id
from ....core.security import hash_password
from ...dto.user_dto import UserUpdateRequest
from ...services.usage_logger import log_rate_usage
from .base import UserUseCase

logger = logging.getLogger(__name__)


class UpdateUserUseCase(UserUseCase):
    """Use case for partially updating an existing user"""

    async def execute(self, request: UserUpdateRequest, usage: RateUsage) -> Result[User]:
        """
        Update the supplied fields of a user

        A field is replaced only when the request carries a truthy value for
        it; ``None``, ``""`` and ``0`` all leave the stored value unchanged.
        Email and username are re-checked for duplicates only when they
        differ from the stored values. The password is re-hashed with a fresh
        salt when supplied and kept as-is otherwise.

        Args:
            request: Update request with the user id and the fields to change
            usage: Rate-usage snapshot of the current request

        Returns:
            Ok with the updated user, or Err with a ValidationError (bad
            input, unknown user) or a DuplicateError
        """
        log_rate_usage(usage, "updateUser")
        logger.info(f"Updating user: {request.id}")

        id_check = validate_user_id(request.id)
        if isinstance(id_check, Err):
            return self._reject(id_check.error)

        validation = validate_user_changes(
            age=request.age,
            email=request.email,
            contact_number=request.contact_number,
        )
        if isinstance(validation, Err):
            return self._reject(validation.error)

        user = await self.user_repository.find_by_id(request.id)
        if user is None:
            logger.warning(f"User not found: {request.id}")
            return Err(ValidationError(USER_NOT_FOUND))

        if request.email and request.email != user.email:
            email_check = await self._check_email_available(request.email)
            if isinstance(email_check, Err):
                return email_check

        if request.username and request.username != user.username:
            username_check = await self._check_username_available(request.username)
            if isinstance(username_check, Err):
                return username_check

        updated_user = replace(
            user,
            full_name=request.full_name or user.full_name,
            age=request.age or user.age,
            address=request.address or user.address,
            email=request.email or user.email,
            contact_number=request.contact_number or user.contact_number,
            username=request.username or user.username,
        )
        if request.password:
            updated_user.hashed_password = hash_password(request.password)

        result = await self._persist(updated_user)
        if isinstance(result, Err):
            return result

        logger.info(f"User updated: {result.value.email}")
        return result
