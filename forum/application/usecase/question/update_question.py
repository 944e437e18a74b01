"""Edit and delete question use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import QuestionService, UserService
from forum.domain.value import QuestionId, UserId

from .ask_question import QuestionItem


class UpdateQuestionRequest(BaseModel):
    """Update question request. Fields left as None are not changed."""

    question_id: str
    user_id: str  # From authenticated user
    title: str | None = None
    content: str | None = None


class UpdateQuestionUseCase:
    """Use case for editing a question (author only).

    An OPEN question becomes UPDATED; other statuses are kept.
    """

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionItem:
        """Execute edit question flow.

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        question = await self.question_service.edit_question(
            QuestionId(UUID(request.question_id)),
            UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
        )
        return QuestionItem.from_question(question)


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # From authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    success: bool


class DeleteQuestionUseCase:
    """Use case for deleting a question with its threads (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), user
        )
        return DeleteQuestionResponse(success=True)
