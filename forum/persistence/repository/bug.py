"""PostgreSQL implementation of BugReport repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import BugReport
from forum.domain.repository import BugReportRepository
from forum.domain.value import BugReportId, UserId
from forum.persistence.mappers import bug_report_to_dict, row_to_bug_report
from forum.persistence.tables import bug_reports_table


class PostgresBugReportRepository(BugReportRepository):
    """PostgreSQL implementation of BugReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: BugReportId) -> Optional[BugReport]:
        stmt = select(bug_reports_table).where(bug_reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_bug_report(row._asdict()) if row else None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[BugReport]:
        stmt = (
            select(bug_reports_table)
            .order_by(desc(bug_reports_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_bug_report(row._asdict()) for row in result.fetchall()]

    async def find_by_user(self, user_id: UserId) -> List[BugReport]:
        stmt = (
            select(bug_reports_table)
            .where(bug_reports_table.c.user_id == user_id)
            .order_by(desc(bug_reports_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_bug_report(row._asdict()) for row in result.fetchall()]

    async def save(self, report: BugReport) -> BugReport:
        """Save a bug report (create or update)."""
        report_dict = bug_report_to_dict(report)
        existing = await self.find_by_id(report.id)

        if existing:
            stmt = (
                update(bug_reports_table)
                .where(bug_reports_table.c.id == report.id)
                .values(**report_dict)
            )
        else:
            stmt = insert(bug_reports_table).values(**report_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return report
