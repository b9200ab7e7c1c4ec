from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .rate_limit_provider import RateLimitProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "RateLimitProvider",
]
