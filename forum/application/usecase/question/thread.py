"""Thread use cases (answers to questions)."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import QuestionService, UserService
from forum.domain.value import QuestionId, ThreadId, UserId

from .ask_question import ThreadItem


class PostThreadRequest(BaseModel):
    """Post thread request."""

    question_id: str
    author_id: str  # From authenticated user
    content: str


class PostThreadUseCase:
    """Use case for answering a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize post thread use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: PostThreadRequest) -> ThreadItem:
        """Execute post thread flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        thread = await self.question_service.post_thread(
            QuestionId(UUID(request.question_id)),
            UserId(UUID(request.author_id)),
            request.content,
        )
        return ThreadItem.from_thread(thread)


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadUseCase:
    """Use case for reading a single thread."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetThreadRequest) -> ThreadItem:
        thread = await self.question_service.get_thread(ThreadId(UUID(request.thread_id)))
        return ThreadItem.from_thread(thread)


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    thread_id: str
    user_id: str  # From authenticated user
    content: str


class UpdateThreadUseCase:
    """Use case for editing a thread (author only)."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateThreadRequest) -> ThreadItem:
        thread = await self.question_service.edit_thread(
            ThreadId(UUID(request.thread_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return ThreadItem.from_thread(thread)


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str
    user_id: str  # From authenticated user


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    success: bool


class DeleteThreadUseCase:
    """Use case for deleting a thread (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.question_service.delete_thread(ThreadId(UUID(request.thread_id)), user)
        return DeleteThreadResponse(success=True)
