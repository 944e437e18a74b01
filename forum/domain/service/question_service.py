"""Question and thread domain service, including the solve workflow."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import (
    InvalidStateTransitionError,
    NotAuthorizedError,
    NotFoundError,
)
from forum.domain.model import Question, Thread, User
from forum.domain.repository import QuestionRepository, ThreadRepository
from forum.domain.value import (
    QuestionId,
    QuestionStatus,
    ThreadId,
    ThreadStatus,
    UserId,
    WARNING_QUESTION_STATUSES,
)

from .base import Service


class QuestionService(Service):
    """Domain service for questions and their answer threads."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            thread_repository: Thread repository
        """
        self.question_repository = question_repository
        self.thread_repository = thread_repository

    async def ask_question(
        self, author_id: UserId, title: str, content: str
    ) -> Question:
        """Create an OPEN question."""
        with logfire.span("question_service.ask_question", author_id=str(author_id)):
            question = Question(
                id=QuestionId(uuid4()),
                author_id=author_id,
                title=title,
                content=content,
                status=QuestionStatus.OPEN,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def list_questions(
        self, include_flagged: bool = False, limit: int = 30, offset: int = 0
    ) -> list[Question]:
        """List questions newest first.

        Questions in a warning status are left out unless ``include_flagged``.
        """
        exclude = () if include_flagged else WARNING_QUESTION_STATUSES
        return await self.question_repository.find_all(
            exclude_statuses=exclude, limit=limit, offset=offset
        )

    async def list_questions_by_user(self, author_id: UserId) -> list[Question]:
        return await self.question_repository.find_by_author(author_id)

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def get_threads(self, question_id: QuestionId) -> list[Thread]:
        """Threads of a question, oldest first."""
        await self.get_question(question_id)
        return await self.thread_repository.find_by_question(question_id)

    async def edit_question(
        self,
        question_id: QuestionId,
        user_id: UserId,
        title: str | None = None,
        content: str | None = None,
    ) -> Question:
        """Edit a question's title and/or content.

        An OPEN question becomes UPDATED; other statuses are kept.

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "question_service.edit_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != user_id:
                raise NotAuthorizedError("question", str(question_id), str(user_id))

            changes: dict = {
                "status": question.status.after_edit(),
                "updated_at": datetime.now(),
            }
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content

            updated = await self.question_repository.save(
                question.model_copy(update=changes)
            )
            logfire.info(
                "Question edited",
                question_id=str(question_id),
                status=updated.status.value,
            )
            return updated

    async def delete_question(self, question_id: QuestionId, user: User) -> None:
        """Delete a question and its threads (author or admin)."""
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user.id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != user.id and not user.is_admin:
                raise NotAuthorizedError("question", str(question_id), str(user.id))
            await self.question_repository.delete(question_id)
            logfire.info("Question deleted", question_id=str(question_id))

    async def post_thread(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Thread:
        """Answer a question with a new OPEN thread."""
        with logfire.span(
            "question_service.post_thread",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            await self.get_question(question_id)
            thread = Thread(
                id=ThreadId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                content=content,
                status=ThreadStatus.OPEN,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created", thread_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        thread = await self.thread_repository.find_by_id(thread_id)
        if not thread:
            logfire.warn("Thread not found", thread_id=str(thread_id))
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def edit_thread(
        self, thread_id: ThreadId, user_id: UserId, content: str
    ) -> Thread:
        thread = await self.get_thread(thread_id)
        if thread.author_id != user_id:
            raise NotAuthorizedError("thread", str(thread_id), str(user_id))
        return await self.thread_repository.save(
            thread.model_copy(update={"content": content, "updated_at": datetime.now()})
        )

    async def delete_thread(self, thread_id: ThreadId, user: User) -> None:
        thread = await self.get_thread(thread_id)
        if thread.author_id != user.id and not user.is_admin:
            raise NotAuthorizedError("thread", str(thread_id), str(user.id))
        await self.thread_repository.delete(thread_id)
        logfire.info("Thread deleted", thread_id=str(thread_id))

    async def mark_as_solved(
        self, thread_id: ThreadId, user: User
    ) -> tuple[Question, Thread]:
        """Mark a thread as the solution of its question.

        Both preconditions are checked before anything is written: the
        thread must not already be the SOLUTION and the question must not
        already be ANSWERED. The question and the thread are then updated
        together.

        Args:
            thread_id: Thread chosen as the solution
            user: User marking it (question author or admin)

        Returns:
            The answered question and the solution thread

        Raises:
            NotFoundError: If the thread or its question doesn't exist
            NotAuthorizedError: If the user may not close the question
            InvalidStateTransitionError: If either side is already solved
        """
        with logfire.span(
            "question_service.mark_as_solved",
            thread_id=str(thread_id),
            user_id=str(user.id),
        ):
            thread = await self.get_thread(thread_id)
            question = await self.get_question(thread.question_id)

            if question.author_id != user.id and not user.is_admin:
                raise NotAuthorizedError("question", str(question.id), str(user.id))

            if not thread.status.can_transition_to(ThreadStatus.SOLUTION):
                logfire.warn("Thread already solution", thread_id=str(thread_id))
                raise InvalidStateTransitionError(
                    "thread", thread.status.value, ThreadStatus.SOLUTION.value
                )
            if not question.status.can_transition_to(QuestionStatus.ANSWERED):
                logfire.warn(
                    "Question cannot be answered",
                    question_id=str(question.id),
                    status=question.status.value,
                )
                raise InvalidStateTransitionError(
                    "question", question.status.value, QuestionStatus.ANSWERED.value
                )

            now = datetime.now()
            answered = await self.question_repository.save(
                question.model_copy(
                    update={"status": QuestionStatus.ANSWERED, "updated_at": now}
                )
            )
            solution = await self.thread_repository.save(
                thread.model_copy(
                    update={"status": ThreadStatus.SOLUTION, "updated_at": now}
                )
            )
            logfire.info(
                "Question solved",
                question_id=str(question.id),
                thread_id=str(thread_id),
            )
            return answered, solution
