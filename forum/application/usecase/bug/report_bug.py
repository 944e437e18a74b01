"""Bug report use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.domain.error import NotAuthorizedError
from forum.domain.model import BugReport
from forum.domain.service import BugService, UserService
from forum.domain.value import BugReportId, BugReportStatus, UserId


class BugReportItem(BaseModel):
    """Bug report as returned by the API."""

    id: str
    user_id: str
    title: str
    description: str
    status: BugReportStatus
    comment: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_report(cls, report: BugReport) -> "BugReportItem":
        return cls(
            id=str(report.id),
            user_id=str(report.user_id),
            title=report.title,
            description=report.description,
            status=report.status,
            comment=report.comment,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )


class ReportBugRequest(BaseModel):
    """Report bug request."""

    user_id: str  # From authenticated user
    title: str
    description: str


class ReportBugUseCase:
    """Use case for filing a bug report."""

    def __init__(self, bug_service: BugService) -> None:
        self.bug_service = bug_service

    async def execute(self, request: ReportBugRequest) -> BugReportItem:
        report = await self.bug_service.report_bug(
            UserId(UUID(request.user_id)), request.title, request.description
        )
        return BugReportItem.from_report(report)


class ListBugReportsRequest(BaseModel):
    """List bug reports request.

    Without ``user_id`` every report is listed, which requires an admin.
    """

    actor_id: str  # From authenticated user
    user_id: Optional[str] = None
    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class ListBugReportsResponse(BaseModel):
    """List bug reports response, newest first."""

    reports: list[BugReportItem]


class ListBugReportsUseCase:
    """Use case for listing bug reports."""

    def __init__(self, bug_service: BugService, user_service: UserService) -> None:
        """Initialize list bug reports use case.

        Args:
            bug_service: Bug domain service
            user_service: User domain service
        """
        self.bug_service = bug_service
        self.user_service = user_service

    async def execute(self, request: ListBugReportsRequest) -> ListBugReportsResponse:
        """Execute list flow.

        Users may list their own reports; anything else needs an admin.

        Raises:
            AdminRequiredError: If a non-admin lists someone else's reports
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))

        if request.user_id and UUID(request.user_id) == actor.id:
            reports = await self.bug_service.list_bug_reports_by_user(actor.id)
        else:
            ensure_admin(actor, "list_bug_reports")
            if request.user_id:
                reports = await self.bug_service.list_bug_reports_by_user(
                    UserId(UUID(request.user_id))
                )
            else:
                reports = await self.bug_service.list_bug_reports(
                    limit=request.limit, offset=request.offset
                )

        return ListBugReportsResponse(
            reports=[BugReportItem.from_report(r) for r in reports]
        )


class GetBugReportRequest(BaseModel):
    """Get bug report request."""

    report_id: str
    actor_id: str  # From authenticated user


class GetBugReportUseCase:
    """Use case for reading a bug report (reporter or admin)."""

    def __init__(self, bug_service: BugService, user_service: UserService) -> None:
        self.bug_service = bug_service
        self.user_service = user_service

    async def execute(self, request: GetBugReportRequest) -> BugReportItem:
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        report = await self.bug_service.get_bug_report(
            BugReportId(UUID(request.report_id))
        )
        if report.user_id != actor.id and not actor.is_admin:
            raise NotAuthorizedError("bug report", request.report_id, str(actor.id))
        return BugReportItem.from_report(report)
