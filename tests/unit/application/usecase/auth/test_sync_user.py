"""Unit tests for SyncUserUseCase."""

import json

import pydantic
import pytest

from forum.application.usecase.auth import SyncUserUseCase
from forum.application.usecase.auth.sync_user import SyncUserRequest
from forum.config import AuthSettings
from forum.domain.error import ConflictError
from forum.domain.repository import UserRepository
from forum.util.error import SignatureError
from forum.util.webhook import sign_payload
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _signed(payload: dict, secret: str) -> SyncUserRequest:
    body = json.dumps(payload).encode()
    return SyncUserRequest(body=body, signature=sign_payload(body, secret))


class TestSyncUserUseCase:
    """Tests for SyncUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_webhook_creates_user(self, unit_env):
        """A signed payload for a new account creates the user."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)
        settings = await unit_env.get(AuthSettings)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(
            _signed(
                {"external_id": "idp|42", "username": "alice", "email": "a@x.io"},
                settings.webhook_secret,
            )
        )

        # Assert
        assert response.created is True
        assert response.username == "alice"
        user = await user_repo.find_by_external_id("idp|42")
        assert str(user.id) == response.user_id
        assert user.email == "a@x.io"

    @pytest.mark.asyncio
    async def test_repeated_webhook_is_idempotent(self, unit_env):
        """Syncing the same account twice returns the existing user."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)
        settings = await unit_env.get(AuthSettings)
        payload = {"external_id": "idp|42", "username": "alice"}
        first = await use_case.execute(_signed(payload, settings.webhook_secret))

        # Act
        second = await use_case.execute(_signed(payload, settings.webhook_secret))

        # Assert
        assert second.created is False
        assert second.user_id == first.user_id

    @pytest.mark.asyncio
    async def test_taken_username_raises_conflict(self, unit_env):
        """Another account cannot claim an existing username."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)
        settings = await unit_env.get(AuthSettings)
        await use_case.execute(
            _signed({"external_id": "idp|1", "username": "alice"}, settings.webhook_secret)
        )

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(
                _signed(
                    {"external_id": "idp|2", "username": "alice"},
                    settings.webhook_secret,
                )
            )

    @pytest.mark.asyncio
    async def test_wrong_signature_raises_signature_error(self, unit_env):
        """Bodies signed with another secret are rejected before parsing."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act & Assert
        with pytest.raises(SignatureError):
            await use_case.execute(
                _signed({"external_id": "idp|42", "username": "alice"}, "not-the-secret")
            )

        assert await user_repo.find_by_external_id("idp|42") is None

    @pytest.mark.asyncio
    async def test_missing_signature_raises_signature_error(self, unit_env):
        """Unsigned bodies are rejected."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)

        # Act & Assert
        with pytest.raises(SignatureError):
            await use_case.execute(SyncUserRequest(body=b"{}", signature=None))

    @pytest.mark.asyncio
    async def test_malformed_payload_raises_validation_error(self, unit_env):
        """Signed but invalid payloads fail validation."""
        # Arrange
        use_case = await unit_env.get(SyncUserUseCase)
        settings = await unit_env.get(AuthSettings)

        # Act & Assert
        with pytest.raises(pydantic.ValidationError):
            await use_case.execute(
                _signed({"username": "alice"}, settings.webhook_secret)
            )
