"""
Shared pytest fixtures for feed-backend tests.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple
from unittest.mock import MagicMock, patch
import itertools

import pytest

from feed_backend.domain.exceptions import ConflictError
from feed_backend.domain.models.post import Post
from feed_backend.domain.models.post_event import PostEvent
from feed_backend.domain.models.user import User
from feed_backend.domain.repositories.post_repository import PostRepository
from feed_backend.domain.repositories.user_repository import UserRepository
from feed_backend.domain.services.asset_store import AssetStore
from feed_backend.domain.services.event_publisher import EventPublisher


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_feed_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.posts_per_page = 2
    mock.asset_upload_dir = "images"
    mock.asset_upload_max_mb = 1
    mock.realtime_queue_size = 10

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("feed_backend.core.config.get_settings", return_value=mock), patch(
        "feed_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


# -----------------------------------------------------------------------------
# In-memory collaborators for end-to-end use case flows
# -----------------------------------------------------------------------------


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self._ids = itertools.count(1)

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def save(self, user: User) -> User:
        if user.id is None:
            if await self.find_by_email(user.email) is not None:
                raise ConflictError("User with this email already exists")
            user.id = f"user-{next(self._ids)}"
        self.users[user.id] = user
        return user

    async def add_post(self, user_id: str, post_id: str) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        if post_id not in user.posts:
            user.posts.append(post_id)
        return True

    async def remove_post(self, user_id: str, post_id: str) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        user.posts = [p for p in user.posts if p != post_id]
        return True


class InMemoryPostRepository(PostRepository):
    """Assigns strictly increasing created_at values so ordering is deterministic."""

    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return self.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        now = self._tick()
        if post.id is None:
            post.id = f"post-{next(self._ids)}"
            post.created_at = now
        post.updated_at = now
        self.posts[post.id] = post
        return post

    async def delete(self, post_id: str) -> bool:
        return self.posts.pop(post_id, None) is not None

    async def list_recent(self, skip: int, limit: int) -> Tuple[int, List[Post]]:
        ordered = sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)
        return len(ordered), ordered[skip:skip + limit]


class RecordingAssetStore(AssetStore):
    def __init__(self) -> None:
        self.deleted: List[str] = []

    async def store(self, data: bytes, filename: str) -> str:
        return f"images/{filename}"

    async def delete(self, reference: str) -> None:
        self.deleted.append(reference)


class RecordingPublisher(EventPublisher):
    def __init__(self) -> None:
        self.events: List[PostEvent] = []

    def publish(self, event: PostEvent) -> None:
        self.events.append(event)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def asset_store():
    return RecordingAssetStore()


@pytest.fixture
def publisher():
    return RecordingPublisher()
