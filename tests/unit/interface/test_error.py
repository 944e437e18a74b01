"""Unit tests for to_http_exception."""

import pytest
from fastapi import HTTPException

from forum.adapter.error import StorageError
from forum.domain.error import (
    AdminRequiredError,
    BannedUserError,
    ConflictError,
    InvalidStateTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from forum.interface.error import AuthenticationError, to_http_exception
from forum.util.error import SignatureError
from forum.util.jwt import JWTError


class TestToHttpException:
    """Tests for the error to status code mapping."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (AuthenticationError("Not authenticated"), 401),
            (JWTError("Invalid token"), 401),
            (SignatureError("Invalid webhook signature"), 401),
            (NotAuthorizedError("post", "p1", "u1"), 403),
            (AdminRequiredError("create_plan", "u1"), 403),
            (BannedUserError("u1"), 403),
            (NotFoundError("Post", "p1"), 404),
            (ConflictError("Already liked this post"), 409),
            (InvalidStateTransitionError("thread", "solution", "solution"), 409),
            (ValidationError("Post is not a poll"), 400),
            (ValueError("badly formed hexadecimal UUID string"), 400),
            (StorageError("Failed to upload"), 502),
        ],
    )
    def test_known_errors_map_to_status(self, error, status_code):
        """Each error family has a fixed status code."""
        # Act
        result = to_http_exception(error, "do something")

        # Assert
        assert result.status_code == status_code

    def test_unexpected_error_becomes_generic_500(self):
        """Unknown errors don't leak their message."""
        # Act
        result = to_http_exception(RuntimeError("db password is hunter2"), "like post")

        # Assert
        assert result.status_code == 500
        assert result.detail == "Failed to like post"

    def test_http_exception_passes_through(self):
        """Errors already mapped by the route are returned unchanged."""
        # Arrange
        original = HTTPException(status_code=418, detail="teapot")

        # Act
        result = to_http_exception(original, "brew")

        # Assert
        assert result is original

    def test_expected_error_keeps_message(self):
        """Client errors carry the domain message as detail."""
        # Act
        result = to_http_exception(NotFoundError("Post", "p1"), "get post")

        # Assert
        assert result.detail == "Post not found: p1"
