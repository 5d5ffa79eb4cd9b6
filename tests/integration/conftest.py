"""
Fixtures for API tests: the real app wired to in-memory stores (no MongoDB).
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from feed_backend.application.use_cases.auth import (
    GetUserStatusUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    UpdateUserStatusUseCase,
    VerifyTokenUseCase,
)
from feed_backend.application.use_cases.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from feed_backend.di.base_container import BaseContainer
from feed_backend.domain.services.asset_store import AssetStore
from feed_backend.domain.services.event_publisher import EventPublisher
from feed_backend.infrastructure.notifications import RealtimePublisher, WebSocketManager
from feed_backend.infrastructure.storage import LocalAssetStore

CONTAINER_USE_SITES = [
    "feed_backend.main.get_container",
    "feed_backend.api.v1.dependencies.get_container",
    "feed_backend.api.v1.auth_controller.get_container",
    "feed_backend.api.v1.feed_controller.get_container",
    "feed_backend.api.v1.realtime_controller.get_container",
]


@pytest.fixture
def app_container(user_repo, post_repo, tmp_path):
    container = BaseContainer()
    websocket_manager = WebSocketManager()
    publisher = RealtimePublisher(websocket_manager)
    asset_store = LocalAssetStore(tmp_path / "images")

    container.register_singleton(WebSocketManager, websocket_manager)
    container.register_singleton(RealtimePublisher, publisher)
    container.register_singleton(EventPublisher, publisher)
    container.register_singleton(AssetStore, asset_store)

    container.register_factory(RegisterUserUseCase, lambda: RegisterUserUseCase(user_repo))
    container.register_factory(LoginUserUseCase, lambda: LoginUserUseCase(user_repo))
    container.register_singleton(VerifyTokenUseCase, VerifyTokenUseCase())
    container.register_factory(GetUserStatusUseCase, lambda: GetUserStatusUseCase(user_repo))
    container.register_factory(UpdateUserStatusUseCase, lambda: UpdateUserStatusUseCase(user_repo))

    container.register_factory(ListPostsUseCase, lambda: ListPostsUseCase(post_repo, user_repo, per_page=2))
    container.register_factory(GetPostUseCase, lambda: GetPostUseCase(post_repo, user_repo))
    container.register_factory(CreatePostUseCase, lambda: CreatePostUseCase(post_repo, user_repo, publisher))
    container.register_factory(
        UpdatePostUseCase, lambda: UpdatePostUseCase(post_repo, user_repo, asset_store, publisher)
    )
    container.register_factory(
        DeletePostUseCase, lambda: DeletePostUseCase(post_repo, user_repo, asset_store, publisher)
    )
    return container


@pytest.fixture
def client(app_container, mock_settings):
    """Create test client with the in-memory container."""
    from feed_backend.main import app

    with ExitStack() as stack:
        for target in CONTAINER_USE_SITES:
            stack.enter_context(patch(target, return_value=app_container))
        stack.enter_context(patch("feed_backend.main.ensure_indexes", new=AsyncMock()))
        stack.enter_context(patch("feed_backend.main.close_database"))
        stack.enter_context(
            patch("feed_backend.api.v1.feed_controller.get_settings", return_value=mock_settings)
        )
        with TestClient(app) as c:
            yield c


@pytest.fixture
def signup_and_login():
    """Register then log in; returns (user_id, auth headers)"""

    def _signup_and_login(client, email="user@example.com", name="Test User", password="secret1"):
        response = client.post(
            "/api/v1/auth/signup",
            json={"email": email, "name": name, "password": password},
        )
        assert response.status_code == 201
        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        data = response.json()
        return data["user_id"], {"Authorization": f"Bearer {data['token']}"}

    return _signup_and_login


@pytest.fixture
def auth_user(client, signup_and_login):
    """(user_id, headers) for a registered, logged-in user"""
    return signup_and_login(client)
