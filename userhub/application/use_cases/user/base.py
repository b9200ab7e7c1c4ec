# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UniqueFieldConflict, UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.errors import DuplicateError, UserError
from ....domain.results import OK_NONE, Err, Ok, Result

logger = logging.getLogger(__name__)


class UserUseCase:
    """Shared lookup and persistence steps for the user use cases"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def _reject(self, error: UserError) -> Err:
        logger.warning(f"{type(error).__name__}: {error.message}")
        return Err(error)

    async def _check_email_available(self, email: str) -> Result[None]:
        """Err(DuplicateError) if another user already has this email"""
        existing = await self.user_repository.find_by_email(email)
        if existing is not None:
            return self._reject(DuplicateError(UserFields.UNIQUE_LABELS[UserFields.EMAIL], email))
        return OK_NONE

    async def _check_username_available(self, username: str) -> Result[None]:
        """Err(DuplicateError) if another user already has this username"""
        existing = await self.user_repository.find_by_username(username)
        if existing is not None:
            return self._reject(
                DuplicateError(UserFields.UNIQUE_LABELS[UserFields.USERNAME], username)
            )
        return OK_NONE

    async def _persist(self, user: User) -> Result[User]:
        """
        Write the user, translating a unique index violation into DuplicateError

        Storage failures other than unique violations propagate unchanged.
        """
        try:
            saved_user = await self.user_repository.save(user)
        except UniqueFieldConflict as conflict:
            return self._reject(DuplicateError(conflict.field, conflict.value))
        return Ok(saved_user)
