from .user import User
from .rate_usage import RateUsage

__all__ = ["User", "RateUsage"]
