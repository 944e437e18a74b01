"""Bug report domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import BugReport
from forum.domain.repository import BugReportRepository
from forum.domain.value import BugReportId, BugReportStatus, UserId

from .base import Service


class BugService(Service):
    """Domain service for bug reports. Status changes go through moderation."""

    def __init__(self, bug_report_repository: BugReportRepository) -> None:
        self.bug_report_repository = bug_report_repository

    async def report_bug(
        self, user_id: UserId, title: str, description: str
    ) -> BugReport:
        """File a new OPEN bug report."""
        with logfire.span("bug_service.report_bug", user_id=str(user_id)):
            report = BugReport(
                id=BugReportId(uuid4()),
                user_id=user_id,
                title=title,
                description=description,
                status=BugReportStatus.OPEN,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.bug_report_repository.save(report)
            logfire.info("Bug reported", report_id=str(saved.id), user_id=str(user_id))
            return saved

    async def get_bug_report(self, report_id: BugReportId) -> BugReport:
        report = await self.bug_report_repository.find_by_id(report_id)
        if not report:
            raise NotFoundError("BugReport", str(report_id))
        return report

    async def list_bug_reports(self, limit: int = 100, offset: int = 0) -> list[BugReport]:
        return await self.bug_report_repository.find_all(limit=limit, offset=offset)

    async def list_bug_reports_by_user(self, user_id: UserId) -> list[BugReport]:
        return await self.bug_report_repository.find_by_user(user_id)
