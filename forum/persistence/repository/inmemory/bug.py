"""In-memory bug report repository for testing."""

from typing import List, Optional

from forum.domain.model.bug import BugReport
from forum.domain.repository.bug import BugReportRepository
from forum.domain.value import BugReportId, UserId


class InMemoryBugReportRepository(BugReportRepository):
    """In-memory implementation of BugReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[BugReportId, BugReport] = {}

    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        return self._reports.get(report_id)

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[BugReport]:
        reports = sorted(
            self._reports.values(), key=lambda r: r.created_at, reverse=True
        )
        return reports[offset : offset + limit]

    async def find_by_user(self, user_id: UserId) -> List[BugReport]:
        reports = [r for r in self._reports.values() if r.user_id == user_id]
        return sorted(reports, key=lambda r: r.created_at, reverse=True)

    async def save(self, report: BugReport) -> BugReport:
        self._reports[report.id] = report
        return report
