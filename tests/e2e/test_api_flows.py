"""End-to-end tests for the HTTP API.

The app runs against the test container: in-memory persistence and storage,
state kept for the lifetime of one test.
"""

import json

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.interface.api.app import create_app
from forum.util.jwt import create_token
from forum.util.webhook import sign_payload
from tests.di import build_test_container


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client():
    """Create test client with a fresh container."""
    return TestClient(create_app(build_test_container()))


def sync_user(client: TestClient, settings: Settings, external_id: str, username: str):
    """Create a user through the identity provider webhook and return its token."""
    body = json.dumps({"external_id": external_id, "username": username}).encode()
    response = client.post(
        "/auth/webhook",
        content=body,
        headers={
            "Content-Type": "application/json",
            "X-Webhook-Signature": sign_payload(body, settings.auth.webhook_secret),
        },
    )
    assert response.status_code == 200
    return response.json()["user_id"], create_token(external_id, settings.auth)


def as_user(token: str) -> dict[str, str]:
    return {"Cookie": f"auth_token={token}"}


class TestHealth:
    """Tests for the health endpoint."""

    def test_health_is_public(self, client):
        """Should report healthy without authentication."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthentication:
    """Tests for webhook sync and cookie authentication."""

    def test_me_without_cookie_is_unauthenticated(self, client):
        """/auth/me never fails for anonymous callers."""
        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_protected_route_without_cookie_returns_401(self, client):
        """Authenticated routes reject anonymous callers."""
        # Act
        response = client.post("/posts", json={"content": "Hello"})

        # Assert
        assert response.status_code == 401

    def test_webhook_with_bad_signature_returns_401(self, client):
        """Unsigned or wrongly signed webhooks are rejected."""
        # Act
        response = client.post(
            "/auth/webhook",
            content=b'{"external_id": "idp|1", "username": "mallory"}',
            headers={"X-Webhook-Signature": "deadbeef"},
        )

        # Assert
        assert response.status_code == 401

    def test_synced_user_is_authenticated_by_token(self, client, settings):
        """A token for a synced account resolves to that user."""
        # Arrange
        user_id, token = sync_user(client, settings, "idp|alice", "alice")

        # Act
        response = client.get("/auth/me", headers=as_user(token))

        # Assert
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["user_id"] == user_id
        assert data["user"]["username"] == "alice"
        assert data["user"]["total_points"] == 0


class TestPostsAndLikes:
    """Tests for posting and liking through the API."""

    def test_like_then_unlike_restores_points(self, client, settings):
        """Likes award points and unlikes take them back."""
        # Arrange
        _, author_token = sync_user(client, settings, "idp|author", "author")
        _, liker_token = sync_user(client, settings, "idp|liker", "liker")
        post = client.post(
            "/posts", json={"content": "Hello forum"}, headers=as_user(author_token)
        ).json()

        # Act
        liked = client.post(f"/posts/{post['id']}/like", headers=as_user(liker_token))
        duplicate = client.post(
            f"/posts/{post['id']}/like", headers=as_user(liker_token)
        )
        liker_points = client.get("/points/me", headers=as_user(liker_token)).json()
        unliked = client.delete(f"/posts/{post['id']}/like", headers=as_user(liker_token))
        liker_points_after = client.get(
            "/points/me", headers=as_user(liker_token)
        ).json()

        # Assert
        assert liked.status_code == 201
        assert duplicate.status_code == 409
        assert liker_points["total_points"] == 2
        assert unliked.status_code == 200
        assert liker_points_after["total_points"] == 0

    def test_invalid_body_returns_422(self, client, settings):
        """Request validation happens before any use case runs."""
        # Arrange
        _, token = sync_user(client, settings, "idp|author", "author")

        # Act
        response = client.post(
            "/posts", json={"content": 12, "type": "video"}, headers=as_user(token)
        )

        # Assert
        assert response.status_code == 422

    def test_unknown_post_returns_404(self, client):
        """Missing posts are reported as 404."""
        # Act
        response = client.get("/posts/00000000-0000-0000-0000-000000000000")

        # Assert
        assert response.status_code == 404


class TestFriendsFlow:
    """Tests for the friend request lifecycle through the API."""

    def test_request_accept_and_unfriend(self, client, settings):
        """Relationship moves sent -> friends -> none."""
        # Arrange
        alice_id, alice_token = sync_user(client, settings, "idp|alice", "alice")
        bob_id, bob_token = sync_user(client, settings, "idp|bob", "bob")

        # Act & Assert
        sent = client.post(
            "/friends/requests",
            json={"receiver_id": bob_id},
            headers=as_user(alice_token),
        )
        assert sent.status_code == 201

        relationship = client.get(
            f"/friends/{alice_id}/relationship", headers=as_user(bob_token)
        ).json()
        assert relationship["state"] == "received"

        inbox = client.get("/notifications", headers=as_user(bob_token)).json()
        assert inbox["unread_count"] == 1
        assert inbox["notifications"][0]["url"] == f"/user/{alice_id}"

        accepted = client.post(
            f"/friends/{alice_id}/accept", headers=as_user(bob_token)
        )
        assert accepted.status_code == 200
        assert accepted.json()["status"] == "accepted"

        friends = client.get("/friends", headers=as_user(alice_token)).json()
        assert [f["user_id"] for f in friends["friends"]] == [bob_id]

        client.post(f"/friends/{bob_id}/cancel", headers=as_user(alice_token))
        relationship = client.get(
            f"/friends/{bob_id}/relationship", headers=as_user(alice_token)
        ).json()
        assert relationship["state"] == "none"


class TestQuestionsFlow:
    """Tests for asking and solving questions through the API."""

    def test_solve_question_twice_returns_409(self, client, settings):
        """The solve workflow runs once per question."""
        # Arrange
        _, asker_token = sync_user(client, settings, "idp|asker", "asker")
        _, helper_token = sync_user(client, settings, "idp|helper", "helper")
        question = client.post(
            "/questions",
            json={"title": "Why?", "content": "Because."},
            headers=as_user(asker_token),
        ).json()
        thread = client.post(
            f"/questions/{question['question_id']}/threads",
            json={"content": "Here is why"},
            headers=as_user(helper_token),
        ).json()

        # Act
        solved = client.post(
            f"/threads/{thread['thread_id']}/solve", headers=as_user(asker_token)
        )
        again = client.post(
            f"/threads/{thread['thread_id']}/solve", headers=as_user(asker_token)
        )

        # Assert
        assert solved.status_code == 200
        assert solved.json()["question"]["status"] == "answered"
        assert solved.json()["thread"]["status"] == "solution"
        assert again.status_code == 409


class TestAdminOnly:
    """Tests for admin-only endpoints."""

    def test_regular_user_cannot_create_plan(self, client, settings):
        """Plan management requires an admin."""
        # Arrange
        _, token = sync_user(client, settings, "idp|alice", "alice")

        # Act
        response = client.post(
            "/plans", json={"name": "Pro", "price_cents": 500}, headers=as_user(token)
        )

        # Assert
        assert response.status_code == 403

    def test_plans_are_public(self, client):
        """Anyone can list plans."""
        # Act
        response = client.get("/plans")

        # Assert
        assert response.status_code == 200
        assert response.json()["plans"] == []
