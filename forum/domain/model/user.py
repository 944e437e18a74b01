"""User aggregate root.

Users are created by the identity provider's sync webhook and are looked up
on every request through their external (provider) id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PlanId, UserId, UserRole
from forum.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    Owns posts, questions, point entries, friend requests, friendships and
    notifications. Total points are never stored here; they are always
    derived from the ledger.
    """

    id: UserId
    external_id: str = Field(min_length=1, max_length=255)
    username: Username
    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_picture: Optional[str] = None
    role: UserRole = UserRole.USER
    is_enrolled: bool = False
    is_banned: bool = False
    plan_id: Optional[PlanId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
