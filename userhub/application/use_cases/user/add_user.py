# Standard library imports
import logging

# Local application imports
from ....domain.models.user import User
from ....domain.models.rate_usage import RateUsage
from ....domain.results import Err, Result
from ....domain.validation import validate_new_user
from ....core.security import hash_password
from ...dto.user_dto import UserCreateRequest
from ...services.usage_logger import log_rate_usage
from .base import UserUseCase

logger = logging.getLogger(__name__)


class AddUserUseCase(UserUseCase):
    """Use case for creating a new user"""

    async def execute(self, request: UserCreateRequest, usage: RateUsage) -> Result[User]:
        """
        Create a new user

        Args:
            request: Creation request with every user field
            usage: Rate-usage snapshot of the current request

        Returns:
            Ok with the created user, or Err with a ValidationError when a
            field is missing or malformed, or a DuplicateError when the email
            (checked first) or the username is already taken
        """
        log_rate_usage(usage, "addUser")

        validation = validate_new_user(
            full_name=request.full_name,
            age=request.age,
            address=request.address,
            email=request.email,
            contact_number=request.contact_number,
            username=request.username,
            password=request.password,
        )
        if isinstance(validation, Err):
            return self._reject(validation.error)

        # Email first, then username
        email_check = await self._check_email_available(request.email)
        if isinstance(email_check, Err):
            return email_check

        username_check = await self._check_username_available(request.username)
        if isinstance(username_check, Err):
            return username_check

        new_user = User(
            id=None,  # Will be set by repository
            full_name=request.full_name,
            age=request.age,
            address=request.address,
            email=request.email,
            contact_number=request.contact_number,
            username=request.username,
            hashed_password=hash_password(request.password),
        )

        result = await self._persist(new_user)
        if isinstance(result, Err):
            return result

        logger.info(f"User added: {result.value.email}")
        return result
