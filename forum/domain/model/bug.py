"""Bug report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import BugReportId, BugReportStatus, UserId


class BugReport(DomainModel):
    """User-submitted bug report triaged by admins."""

    id: BugReportId
    user_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    status: BugReportStatus = BugReportStatus.OPEN
    comment: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
