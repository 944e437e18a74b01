"""PostgreSQL implementations of Question and Thread repositories."""

from typing import Collection, List, Optional

from sqlalchemy import and_, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Question, Thread
from forum.domain.repository import QuestionRepository, ThreadRepository
from forum.domain.value import QuestionId, QuestionStatus, ThreadId, ThreadStatus, UserId
from forum.persistence.mappers import (
    question_to_dict,
    row_to_question,
    row_to_thread,
    thread_to_dict,
)
from forum.persistence.tables import questions_table, threads_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_all(
        self,
        exclude_statuses: Collection[QuestionStatus] = (),
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """List questions newest first."""
        stmt = select(questions_table)
        if exclude_statuses:
            stmt = stmt.where(
                questions_table.c.status.notin_([s.value for s in exclude_statuses])
            )
        stmt = (
            stmt.order_by(desc(questions_table.c.created_at)).limit(limit).offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        status: Optional[QuestionStatus] = None,
    ) -> List[Question]:
        stmt = select(questions_table).where(questions_table.c.author_id == author_id)
        if status is not None:
            stmt = stmt.where(questions_table.c.status == status.value)
        stmt = stmt.order_by(desc(questions_table.c.created_at))

        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        question_dict = question_to_dict(question)
        existing = await self.find_by_id(question.id)

        if existing:
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = insert(questions_table).values(**question_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; its threads cascade."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Thread]:
        """A question's threads, oldest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.question_id == question_id)
            .order_by(threads_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def has_solution(self, question_id: QuestionId) -> bool:
        stmt = select(threads_table.c.id).where(
            and_(
                threads_table.c.question_id == question_id,
                threads_table.c.status == ThreadStatus.SOLUTION.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        thread_dict = thread_to_dict(thread)
        existing = await self.find_by_id(thread.id)

        if existing:
            stmt = (
                update(threads_table)
                .where(threads_table.c.id == thread.id)
                .values(**thread_dict)
            )
        else:
            stmt = insert(threads_table).values(**thread_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return thread

    async def delete(self, thread_id: ThreadId) -> bool:
        stmt = delete(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
