"""List and get question use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import QuestionService
from forum.domain.value import QuestionId, UserId

from .ask_question import QuestionItem, ThreadItem


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    author_id: Optional[str] = None  # Only questions by this user
    include_flagged: bool = False  # Honoured for admins only (checked by caller)


class ListQuestionsResponse(BaseModel):
    """List questions response, newest first."""

    questions: list[QuestionItem]


class ListQuestionsUseCase:
    """Use case for listing questions.

    Questions in a warning status (deleted, banned, suspended, flagged,
    under review) are left out unless ``include_flagged`` is set. A user's
    own question list always includes them.
    """

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        if request.author_id:
            questions = await self.question_service.list_questions_by_user(
                UserId(UUID(request.author_id))
            )
        else:
            questions = await self.question_service.list_questions(
                include_flagged=request.include_flagged,
                limit=request.limit,
                offset=request.offset,
            )
        return ListQuestionsResponse(
            questions=[QuestionItem.from_question(q) for q in questions]
        )


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str


class GetQuestionResponse(BaseModel):
    """A question with its threads, oldest thread first."""

    question: QuestionItem
    threads: list[ThreadItem]


class GetQuestionUseCase:
    """Use case for reading a question and its threads."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question_id = QuestionId(UUID(request.question_id))
        question = await self.question_service.get_question(question_id)
        threads = await self.question_service.get_threads(question_id)
        return GetQuestionResponse(
            question=QuestionItem.from_question(question),
            threads=[ThreadItem.from_thread(t) for t in threads],
        )
