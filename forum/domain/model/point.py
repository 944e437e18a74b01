"""Point ledger entry."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PointEntryId, PointType, UserId


class PointEntry(DomainModel):
    """Immutable ledger entry.

    A user's total is the sum of ``points`` over all of their entries.
    Entries are never updated or deleted individually; reversals are
    recorded as new entries with a negative delta.
    """

    id: PointEntryId
    user_id: UserId
    points: int
    type: PointType
    description: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
