# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.models.user import User
from ....domain.models.rate_usage import RateUsage
from ....domain.errors import USER_NOT_FOUND, ValidationError
from ....domain.results import Err, Ok, Result
from ....domain.validation import validate_user_id
from ...services.usage_logger import log_rate_usage
from .base import UserUseCase

logger = logging.getLogger(__name__)


class DeleteUserUseCase(UserUseCase):
    """Use case for deleting a user"""

    async def execute(self, user_id: Optional[str], usage: RateUsage) -> Result[User]:
        """
        Delete a user

        Args:
            user_id: ID of the user to delete
            usage: Rate-usage snapshot of the current request

        Returns:
            Ok with the user as it was before deletion, or Err with a
            ValidationError when the id is missing or matches no user
        """
        log_rate_usage(usage, "deleteUser")
        logger.info(f"Deleting user: {user_id}")

        id_check = validate_user_id(user_id)
        if isinstance(id_check, Err):
            return self._reject(id_check.error)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"User not found for deletion: {user_id}")
            return Err(ValidationError(USER_NOT_FOUND))

        deleted = await self.user_repository.delete(user.id)
        if not deleted:
            # Removed by a concurrent request after the lookup
            logger.warning(f"User vanished before deletion: {user_id}")
            return Err(ValidationError(USER_NOT_FOUND))

        logger.info(f"User deleted: {user.email}")
        return Ok(user)
