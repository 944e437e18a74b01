"""Point ledger repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from forum.domain.model.point import PointEntry
from forum.domain.value import UserId


class PointRepository(ABC):
    """Append-only repository for point ledger entries.

    There is deliberately no update or delete operation: totals are always
    recomputed from the entries.
    """

    @abstractmethod
    async def save(self, entry: PointEntry) -> PointEntry:
        """Append a ledger entry.

        Args:
            entry: The entry to append

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[PointEntry]:
        """List a user's ledger entries, newest first.

        Args:
            user_id: The user's ID

        Returns:
            List of ledger entries
        """
        pass

    @abstractmethod
    async def sum_for_user(self, user_id: UserId) -> int:
        """Sum of all point deltas for a user (0 when there are none).

        Args:
            user_id: The user's ID

        Returns:
            Total points
        """
        pass

    @abstractmethod
    async def sum_for_users(self, user_ids: Sequence[UserId]) -> Dict[UserId, int]:
        """Batch version of ``sum_for_user``.

        Args:
            user_ids: Users to total

        Returns:
            Mapping of every requested user ID to its total (0 when empty)
        """
        pass
