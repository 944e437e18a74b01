"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from forum.domain.model import User
from forum.domain.value import UserId, UserRole
from forum.domain.value.types import Username


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.USER,
    external_id: str | None = None,
    **overrides,
) -> User:
    """Helper function to build test users.

    Args:
        username: Username (must be a valid Username)
        role: User role
        external_id: Identity provider id; derived from the username when omitted
        **overrides: Any other User field

    Returns:
        User entity, not yet saved
    """
    fields = dict(
        id=UserId(uuid4()),
        external_id=external_id or f"idp|{username}",
        username=Username(username),
        role=role,
        created_at=datetime.now(),
        updated_at=datetime.now(),
    )
    fields.update(overrides)
    return User(**fields)
