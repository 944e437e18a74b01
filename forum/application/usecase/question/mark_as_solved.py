"""Mark as solved use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.domain.service import QuestionService, UserService
from forum.domain.value import ThreadId, UserId

from .ask_question import QuestionItem, ThreadItem


class MarkAsSolvedRequest(BaseModel):
    """Mark as solved request."""

    thread_id: str
    user_id: str  # From authenticated user


class MarkAsSolvedResponse(BaseModel):
    """The answered question and its solution thread."""

    question: QuestionItem
    thread: ThreadItem


class MarkAsSolvedUseCase:
    """Use case for accepting a thread as the solution of its question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize mark as solved use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: MarkAsSolvedRequest) -> MarkAsSolvedResponse:
        """Execute solve flow.

        The thread becomes SOLUTION and the question ANSWERED, together.

        Raises:
            NotFoundError: If the thread or its question doesn't exist
            NotAuthorizedError: If the user is neither question author nor admin
            InvalidStateTransitionError: If the thread or question is already solved
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        with logfire.span("mark_as_solved.execute", thread_id=request.thread_id):
            question, thread = await self.question_service.mark_as_solved(
                ThreadId(UUID(request.thread_id)), user
            )

        return MarkAsSolvedResponse(
            question=QuestionItem.from_question(question),
            thread=ThreadItem.from_thread(thread),
        )
