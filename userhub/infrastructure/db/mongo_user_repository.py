# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UniqueFieldConflict, UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_all(self) -> List[User]:
        """
        Return every stored user

        Returns:
            List of User domain models (unfiltered, unpaginated)
        """
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise RuntimeError(f"Error listing users: {str(e)}") from e

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._find_one_by(UserFields.EMAIL, email)

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None
        return await self._find_one_by(UserFields.USERNAME, username)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            UniqueFieldConflict: If email or username collides with another document
            ValueError: If an update targets a document that no longer exists
            RuntimeError: On any other storage failure, including a unique index
                violation that names neither email nor username
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            if user.id:
                object_id = self._to_object_id(user.id)
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
            else:
                result = await self.user_collection.insert_one(user_dict)
                object_id = result.inserted_id

            saved_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except DuplicateKeyError as e:
            conflict = self._to_conflict(e, user)
            if conflict is None:
                raise RuntimeError(f"Error saving user: {str(e)}") from e
            raise conflict from e
        except PyMongoError as e:
            raise RuntimeError(f"Error saving user: {str(e)}") from e

        if saved_document is None:
            raise RuntimeError(f"User {user.id or object_id} was saved but could not be retrieved")
        return self._document_to_user(saved_document)

    async def delete(self, user_id: str) -> bool:
        """
        Delete user by ID

        Args:
            user_id: User ID to delete

        Returns:
            True if a document was removed, False otherwise
        """
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting user: {str(e)}") from e
        return result.deleted_count > 0

    async def _find_one_by(self, field: str, value: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one({field: value})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by {field}: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    def _to_object_id(self, user_id: str) -> ObjectId:
        try:
            return ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            raise ValueError(f"Invalid user ID format: {user_id}")

    def _to_conflict(self, error: DuplicateKeyError, user: User) -> Optional[UniqueFieldConflict]:
        """
        Translate a duplicate key error into the field that collided

        Args:
            error: The error raised by the unique index
            user: The user that was being written

        Returns:
            UniqueFieldConflict naming the user-facing field label and value,
            or None when the error names neither unique field
        """
        details = error.details or {}
        key_value = details.get("keyValue") or {}
        candidates = {
            UserFields.EMAIL: user.email,
            UserFields.USERNAME: user.username,
        }

        for field, label in UserFields.UNIQUE_LABELS.items():
            if field in key_value:
                return UniqueFieldConflict(label, key_value[field])

        # Older servers only name the index in the message
        message = str(error)
        for field, label in UserFields.UNIQUE_LABELS.items():
            if f"{field}_unique" in message or f"{field}_1" in message:
                return UniqueFieldConflict(label, candidates[field])

        return None

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            age=document.get(UserFields.AGE, 0),
            address=document.get(UserFields.ADDRESS, ""),
            email=document.get(UserFields.EMAIL, ""),
            contact_number=document.get(UserFields.CONTACT_NUMBER, ""),
            username=document.get(UserFields.USERNAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.FULL_NAME: user.full_name,
            UserFields.AGE: user.age,
            UserFields.ADDRESS: user.address,
            UserFields.EMAIL: user.email,
            UserFields.CONTACT_NUMBER: user.contact_number,
            UserFields.USERNAME: user.username,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
