from abc import ABC, abstractmethod
from typing import Any, List, Optional
from ..models.user import User


class UniqueFieldConflict(Exception):
    """Raised by a repository when a write violates a unique field constraint"""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Unique constraint violated on {field}: {value!r}")
        self.field = field
        self.value = value


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (create or update)

        Raises:
            UniqueFieldConflict: If the write collides on email or username
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID, returning whether a document was removed"""
        pass
