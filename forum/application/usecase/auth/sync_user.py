"""Sync user use case (identity provider webhook)."""

import logfire
from pydantic import BaseModel, Field

from forum.config import AuthSettings
from forum.domain.service import UserService
from forum.domain.value.types import Username
from forum.util.webhook import verify_signature


class SyncUserPayload(BaseModel):
    """User data pushed by the identity provider."""

    external_id: str = Field(min_length=1, max_length=255)
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None


class SyncUserRequest(BaseModel):
    """Sync user request.

    ``body`` is the raw webhook body; the signature covers exactly these bytes.
    """

    body: bytes
    signature: str | None


class SyncUserResponse(BaseModel):
    """Sync user response."""

    user_id: str
    username: str
    created: bool


class SyncUserUseCase:
    """Use case for creating users announced by the identity provider."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize sync user use case.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings (webhook secret)
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def execute(self, request: SyncUserRequest) -> SyncUserResponse:
        """Execute user sync flow.

        Steps:
        1. Verify the HMAC signature over the raw body
        2. Parse the payload
        3. Create the user unless one with the external id exists

        Raises:
            SignatureError: If the signature is missing or wrong
            pydantic.ValidationError: If the payload is malformed
            ConflictError: If the username is taken by another account
        """
        verify_signature(
            request.body, request.signature, self.auth_settings.webhook_secret
        )
        payload = SyncUserPayload.model_validate_json(request.body)

        with logfire.span("sync_user.execute", external_id=payload.external_id):
            user, created = await self.user_service.sync_user(
                external_id=payload.external_id,
                username=Username(payload.username),
                email=payload.email,
                first_name=payload.first_name,
                last_name=payload.last_name,
                profile_picture=payload.profile_picture,
            )

        return SyncUserResponse(
            user_id=str(user.id), username=user.username.root, created=created
        )
