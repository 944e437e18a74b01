"""Shared use case helpers."""

from forum.domain.error import AdminRequiredError
from forum.domain.model import User


def ensure_admin(user: User, action: str) -> None:
    """Raise AdminRequiredError unless ``user`` is an admin."""
    if not user.is_admin:
        raise AdminRequiredError(action, str(user.id))
