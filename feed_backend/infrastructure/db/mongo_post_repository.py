# Standard library imports
from typing import List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...domain.exceptions import NotFoundError, StoreError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_post_collection


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StoreError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or update existing)

        New posts get created_at/updated_at; updates only refresh updated_at
        and never touch the creator.
        """
        now = utc_now()

        try:
            if post.id:
                object_id = _to_object_id(post.id)
                if object_id is None:
                    raise NotFoundError("Could not find post.")
                update_result = await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": {
                        PostFields.TITLE: post.title,
                        PostFields.CONTENT: post.content,
                        PostFields.IMAGE_URL: post.image_url,
                        PostFields.UPDATED_AT: now,
                    }}
                )
                if update_result.matched_count == 0:
                    raise NotFoundError("Could not find post.")
                document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
            else:
                creator_id = _to_object_id(post.creator_id)
                if creator_id is None:
                    raise StoreError(f"Invalid creator ID: {post.creator_id}")
                result = await self.post_collection.insert_one({
                    PostFields.TITLE: post.title,
                    PostFields.CONTENT: post.content,
                    PostFields.IMAGE_URL: post.image_url,
                    PostFields.CREATOR: creator_id,
                    PostFields.CREATED_AT: now,
                    PostFields.UPDATED_AT: now,
                })
                document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise StoreError(f"Error saving post: {str(e)}")

        if document is None:
            raise StoreError("Post was saved but could not be retrieved")
        return self._document_to_post(document)

    async def delete(self, post_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False
        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StoreError(f"Error deleting post: {str(e)}")
        return result.deleted_count > 0

    async def list_recent(self, skip: int, limit: int) -> Tuple[int, List[Post]]:
        try:
            total = await self.post_collection.count_documents({})
            cursor = (
                self.post_collection.find({})
                .sort([(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)])
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )

            items: List[Post] = []
            async for document in cursor:
                items.append(self._document_to_post(document))
        except PyMongoError as e:
            raise StoreError(f"Error listing posts: {str(e)}")
        return total, items

    def _document_to_post(self, document: dict) -> Post:
        if not document or PostFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            image_url=document.get(PostFields.IMAGE_URL, ""),
            creator_id=str(document.get(PostFields.CREATOR, "")),
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PostFields.UPDATED_AT)),
        )
