# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.models.user import User
from ....domain.models.rate_usage import RateUsage
from ....domain.results import Ok
from ...services.usage_logger import log_rate_usage
from .base import UserUseCase

logger = logging.getLogger(__name__)


class ListUsersUseCase(UserUseCase):
    """Use case for listing every user (no filtering, no pagination)"""

    async def execute(self, usage: RateUsage) -> Ok[List[User]]:
        log_rate_usage(usage, "getUsers")
        logger.info("Fetching all users")
        users = await self.user_repository.find_all()
        return Ok(users)
