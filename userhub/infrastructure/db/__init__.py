from .mongo_connection import (
    check_database_health,
    close_mongo_connection,
    get_client,
    get_database,
    get_user_collection,
)
from .mongo_user_repository import MongoUserRepository
from .indexes import ensure_user_indexes

__all__ = [
    "check_database_health",
    "close_mongo_connection",
    "get_client",
    "get_database",
    "get_user_collection",
    "MongoUserRepository",
    "ensure_user_indexes",
]
