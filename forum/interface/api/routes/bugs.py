"""Bug report routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.bug import (
    BugReportItem,
    GetBugReportRequest,
    GetBugReportUseCase,
    ListBugReportsRequest,
    ListBugReportsResponse,
    ListBugReportsUseCase,
    ReportBugRequest,
    ReportBugUseCase,
)
from forum.interface.api.auth import authenticate
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/bugs", tags=["bugs"], route_class=DishkaRoute)


class ReportBugAPIRequest(BaseModel):
    """API request for reporting a bug."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)


@router.post("", response_model=BugReportItem, status_code=status.HTTP_201_CREATED)
async def report_bug(
    request: ReportBugAPIRequest,
    report_bug_use_case: FromDishka[ReportBugUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BugReportItem:
    """File a bug report."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await report_bug_use_case.execute(
            ReportBugRequest(
                user_id=user.user_id,
                title=request.title,
                description=request.description,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "report bug")


@router.get("", response_model=ListBugReportsResponse)
async def list_bug_reports(
    list_bug_reports_use_case: FromDishka[ListBugReportsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: UUID | None = Query(default=None),
    mine: bool = Query(default=False),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListBugReportsResponse:
    """List bug reports.

    With ``mine`` the current user's own reports are listed. Listing all
    reports or another user's reports requires an admin.
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    target = user.user_id if mine else (str(user_id) if user_id else None)
    try:
        return await list_bug_reports_use_case.execute(
            ListBugReportsRequest(
                actor_id=user.user_id, user_id=target, limit=limit, offset=offset
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list bug reports")


@router.get("/{report_id}", response_model=BugReportItem)
async def get_bug_report(
    report_id: UUID,
    get_bug_report_use_case: FromDishka[GetBugReportUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BugReportItem:
    """Get a bug report (reporter or admin)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await get_bug_report_use_case.execute(
            GetBugReportRequest(report_id=str(report_id), actor_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get bug report")
