from .user_repository import UniqueFieldConflict, UserRepository

__all__ = ["UserRepository", "UniqueFieldConflict"]
