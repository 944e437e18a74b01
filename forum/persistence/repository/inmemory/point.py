"""In-memory point ledger repository for testing."""

from typing import Dict, List, Sequence

from forum.domain.model.point import PointEntry
from forum.domain.repository.point import PointRepository
from forum.domain.value import UserId


class InMemoryPointRepository(PointRepository):
    """In-memory implementation of PointRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[PointEntry] = []

    async def save(self, entry: PointEntry) -> PointEntry:
        self._entries.append(entry)
        return entry

    async def find_by_user(self, user_id: UserId) -> List[PointEntry]:
        """A user's entries, newest first (insertion order breaks ties)."""
        entries = [e for e in self._entries if e.user_id == user_id]
        return list(reversed(sorted(entries, key=lambda e: e.created_at)))

    async def sum_for_user(self, user_id: UserId) -> int:
        return sum(e.points for e in self._entries if e.user_id == user_id)

    async def sum_for_users(self, user_ids: Sequence[UserId]) -> Dict[UserId, int]:
        totals: Dict[UserId, int] = {user_id: 0 for user_id in user_ids}
        for entry in self._entries:
            if entry.user_id in totals:
                totals[entry.user_id] += entry.points
        return totals
