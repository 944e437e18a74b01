"""Bug report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.bug import BugReport
from forum.domain.value import BugReportId, UserId


class BugReportRepository(ABC):
    """Repository for BugReport entity."""

    @abstractmethod
    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        """Find a bug report by ID."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[BugReport]:
        """List all bug reports, newest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[BugReport]:
        """List a user's bug reports, newest first."""
        pass

    @abstractmethod
    async def save(self, report: BugReport) -> BugReport:
        """Save a bug report (create or update)."""
        pass
