# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, NotFoundError, StoreError
from .mongo_connection import get_user_collection


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address (exact, case-sensitive match)

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise StoreError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StoreError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the email is already registered
            NotFoundError: If updating a user that does not exist
            StoreError: On any other database failure
        """
        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise NotFoundError(f"User with ID {user.id} not found")
                # The posts list is maintained by add_post/remove_post only
                user_dict.pop(UserFields.POSTS, None)
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise NotFoundError(f"User with ID {user.id} not found")
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError:
            raise ConflictError("User with this email already exists")
        except PyMongoError as e:
            raise StoreError(f"Error saving user: {str(e)}")

        if document is None:
            raise StoreError("User was saved but could not be retrieved")
        return self._document_to_user(document)

    async def add_post(self, user_id: str, post_id: str) -> bool:
        return await self._update_posts(user_id, {"$addToSet": {UserFields.POSTS: _to_object_id(post_id)}})

    async def remove_post(self, user_id: str, post_id: str) -> bool:
        return await self._update_posts(user_id, {"$pull": {UserFields.POSTS: _to_object_id(post_id)}})

    async def _update_posts(self, user_id: str, update: dict) -> bool:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False
        try:
            result = await self.user_collection.update_one({UserFields.MONGO_ID: object_id}, update)
        except PyMongoError as e:
            raise StoreError(f"Error updating posts of user {user_id}: {str(e)}")
        return result.matched_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            status=document.get(UserFields.STATUS, UserFields.DEFAULT_STATUS),
            posts=[str(post_id) for post_id in document.get(UserFields.POSTS, [])],
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
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.STATUS: user.status,
            UserFields.POSTS: [
                object_id for object_id in (_to_object_id(post_id) for post_id in user.posts)
                if object_id is not None
            ],
        }
