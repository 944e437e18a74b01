"""Bug report use cases."""

from .report_bug import (
    BugReportItem,
    GetBugReportRequest,
    GetBugReportUseCase,
    ListBugReportsRequest,
    ListBugReportsResponse,
    ListBugReportsUseCase,
    ReportBugRequest,
    ReportBugUseCase,
)

__all__ = [
    "BugReportItem",
    "GetBugReportRequest",
    "GetBugReportUseCase",
    "ListBugReportsRequest",
    "ListBugReportsResponse",
    "ListBugReportsUseCase",
    "ReportBugRequest",
    "ReportBugUseCase",
]
