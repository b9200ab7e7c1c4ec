"""
Database index management

Unique indexes on email and username are the authority for uniqueness;
the duplicate checks in the use cases only produce an earlier, friendlier
error. Creating an index that already exists is a no-op, so this is safe to
run on every startup.
"""

# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


async def ensure_user_indexes(user_collection: AsyncIOMotorCollection) -> None:
    """
    Create the unique indexes of the users collection

    Args:
        user_collection: MongoDB collection for users
    """
    await user_collection.create_index(
        UserFields.EMAIL, unique=True, name="email_unique"
    )
    logger.debug(f"Ensured unique index on {user_collection.name}.{UserFields.EMAIL}")

    await user_collection.create_index(
        UserFields.USERNAME, unique=True, name="username_unique"
    )
    logger.debug(f"Ensured unique index on {user_collection.name}.{UserFields.USERNAME}")
