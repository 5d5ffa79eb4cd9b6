"""
Integration tests for feed API endpoints and the realtime socket.
Uses TestClient against in-memory repositories (no real DB).
"""
import pytest

pytestmark = pytest.mark.integration


def _post_body(title="Hello World", content="Hello World Content", image_url="images/a.png"):
    return {"title": title, "content": content, "image_url": image_url}


class TestPostsAPI:
    """Tests for /api/v1/feed/posts endpoints"""

    def test_list_empty_feed(self, client):
        response = client.get("/api/v1/feed/posts")
        assert response.status_code == 200
        assert response.json() == {"total_items": 0, "posts": []}

    def test_page_must_be_positive(self, client):
        response = client.get("/api/v1/feed/posts", params={"page": 0})
        assert response.status_code == 422

    def test_create_requires_authentication(self, client):
        response = client.post("/api/v1/feed/posts", json=_post_body())
        assert response.status_code == 401
        assert response.json()["kind"] == "unauthenticated"

    def test_create_and_fetch(self, client, auth_user):
        user_id, headers = auth_user

        response = client.post("/api/v1/feed/posts", json=_post_body(), headers=headers)
        assert response.status_code == 201
        created = response.json()
        assert created["creator"] == {"id": user_id, "name": "Test User"}

        response = client.get(f"/api/v1/feed/posts/{created['id']}")
        assert response.status_code == 200
        assert response.json()["title"] == "Hello World"

    def test_create_with_short_fields_returns_422(self, client, auth_user):
        _, headers = auth_user
        response = client.post(
            "/api/v1/feed/posts",
            json=_post_body(title="Hi", content="tiny"),
            headers=headers,
        )
        assert response.status_code == 422
        assert [error["field"] for error in response.json()["data"]] == ["title", "content"]

    def test_list_paginates_newest_first(self, client, auth_user):
        _, headers = auth_user
        for i in range(3):
            client.post("/api/v1/feed/posts", json=_post_body(title=f"Post number {i}"), headers=headers)

        first = client.get("/api/v1/feed/posts").json()
        second = client.get("/api/v1/feed/posts", params={"page": 2}).json()

        assert first["total_items"] == 3
        assert [p["title"] for p in first["posts"]] == ["Post number 2", "Post number 1"]
        assert [p["title"] for p in second["posts"]] == ["Post number 0"]

    def test_get_missing_post_returns_404(self, client):
        response = client.get("/api/v1/feed/posts/post-404")
        assert response.status_code == 404
        assert response.json()["message"] == "Could not find post."

    def test_update_by_creator(self, client, auth_user):
        _, headers = auth_user
        post_id = client.post("/api/v1/feed/posts", json=_post_body(), headers=headers).json()["id"]

        response = client.put(
            f"/api/v1/feed/posts/{post_id}",
            json=_post_body(title="Updated title"),
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Updated title"

    def test_update_by_other_user_returns_403(self, client, auth_user, signup_and_login):
        _, owner_headers = auth_user
        _, other_headers = signup_and_login(client, email="other@example.com", name="Other")
        post_id = client.post("/api/v1/feed/posts", json=_post_body(), headers=owner_headers).json()["id"]

        response = client.put(
            f"/api/v1/feed/posts/{post_id}",
            json=_post_body(title="Hijacked title"),
            headers=other_headers,
        )

        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"

    def test_delete_by_creator(self, client, auth_user):
        _, headers = auth_user
        post_id = client.post("/api/v1/feed/posts", json=_post_body(), headers=headers).json()["id"]

        response = client.delete(f"/api/v1/feed/posts/{post_id}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Deleted post."}
        assert client.get(f"/api/v1/feed/posts/{post_id}").status_code == 404

    def test_delete_anonymous_returns_401(self, client, auth_user):
        _, headers = auth_user
        post_id = client.post("/api/v1/feed/posts", json=_post_body(), headers=headers).json()["id"]

        response = client.delete(f"/api/v1/feed/posts/{post_id}")

        assert response.status_code == 401
        assert client.get(f"/api/v1/feed/posts/{post_id}").status_code == 200


class TestImageUploadAPI:
    """Tests for /api/v1/feed/images"""

    def test_upload_requires_authentication(self, client):
        response = client.post(
            "/api/v1/feed/images",
            files={"image": ("photo.png", b"\x89PNG", "image/png")},
        )
        assert response.status_code == 401

    def test_upload_returns_reference(self, client, auth_user):
        _, headers = auth_user
        response = client.post(
            "/api/v1/feed/images",
            files={"image": ("photo.png", b"\x89PNG", "image/png")},
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json()["image_url"].endswith(".png")

    def test_upload_rejects_unsupported_type(self, client, auth_user):
        _, headers = auth_user
        response = client.post(
            "/api/v1/feed/images",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=headers,
        )
        assert response.status_code == 422

    def test_upload_rejects_oversized_file(self, client, auth_user):
        _, headers = auth_user
        too_big = b"0" * (1024 * 1024 + 1)
        response = client.post(
            "/api/v1/feed/images",
            files={"image": ("photo.png", too_big, "image/png")},
            headers=headers,
        )
        assert response.status_code == 413


class TestFeedSocket:
    """Tests for the /api/v1/feed/ws realtime endpoint"""

    def test_ping_pong(self, client):
        with client.websocket_connect("/api/v1/feed/ws") as websocket:
            assert websocket.receive_json()["type"] == "connection_established"
            websocket.send_text("ping")
            assert websocket.receive_text() == "pong"

    def test_subscriber_receives_create_event(self, client, auth_user):
        _, headers = auth_user
        with client.websocket_connect("/api/v1/feed/ws") as websocket:
            websocket.receive_json()

            created = client.post("/api/v1/feed/posts", json=_post_body(), headers=headers).json()

            message = websocket.receive_json()
            assert message["topic"] == "posts"
            assert message["action"] == "create"
            assert message["post"]["id"] == created["id"]
