"""Ask question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Question, Thread
from forum.domain.service import QuestionService
from forum.domain.value import QuestionStatus, ThreadStatus, UserId


class QuestionItem(BaseModel):
    """Question as returned by the API."""

    question_id: str
    author_id: str
    title: str
    content: str
    status: QuestionStatus
    moderation_comment: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionItem":
        return cls(
            question_id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            content=question.content,
            status=question.status,
            moderation_comment=question.moderation_comment,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class ThreadItem(BaseModel):
    """Thread (answer) as returned by the API."""

    thread_id: str
    question_id: str
    author_id: str
    content: str
    status: ThreadStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadItem":
        return cls(
            thread_id=str(thread.id),
            question_id=str(thread.question_id),
            author_id=str(thread.author_id),
            content=thread.content,
            status=thread.status,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
        )


class AskQuestionRequest(BaseModel):
    """Ask question request."""

    author_id: str  # From authenticated user
    title: str
    content: str


class AskQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: AskQuestionRequest) -> QuestionItem:
        question = await self.question_service.ask_question(
            UserId(UUID(request.author_id)), request.title, request.content
        )
        return QuestionItem.from_question(question)
