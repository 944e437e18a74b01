"""Question and thread routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.question import (
    AskQuestionRequest,
    AskQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    MarkAsSolvedRequest,
    MarkAsSolvedResponse,
    MarkAsSolvedUseCase,
    PostThreadRequest,
    PostThreadUseCase,
    QuestionItem,
    ThreadItem,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from forum.interface.api.auth import authenticate, authenticate_optional
from forum.interface.error import to_http_exception

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


class AskQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, min_length=1, max_length=10000)


class ThreadAPIRequest(BaseModel):
    """API request for posting or editing a thread."""

    content: str = Field(min_length=1, max_length=10000)


@router.post(
    "/questions", response_model=QuestionItem, status_code=status.HTTP_201_CREATED
)
async def ask_question(
    request: AskQuestionAPIRequest,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionItem:
    """Ask a question."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await ask_question_use_case.execute(
            AskQuestionRequest(
                author_id=user.user_id, title=request.title, content=request.content
            )
        )
    except Exception as e:
        raise to_http_exception(e, "ask question")


@router.get("/questions", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    author_id: UUID | None = Query(default=None),
    include_flagged: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions, newest first.

    Args:
        list_questions_use_case: List questions use case from DI
        get_current_user_use_case: Get current user use case from DI
        limit: Page size
        offset: Page offset
        author_id: Only questions by this user (all statuses)
        include_flagged: Include moderated questions (admins only)
        auth_token: JWT token from cookie (optional)

    Returns:
        Page of questions
    """
    user = await authenticate_optional(auth_token, get_current_user_use_case)

    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                limit=limit,
                offset=offset,
                author_id=str(author_id) if author_id else None,
                include_flagged=include_flagged and user is not None and user.is_admin,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list questions")


@router.get("/questions/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a question with its threads."""
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=str(question_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get question")


@router.patch("/questions/{question_id}", response_model=QuestionItem)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionItem:
    """Edit a question (author only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                title=request.title,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update question")


@router.delete("/questions/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question and its threads (author or admin)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=str(question_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete question")


@router.post(
    "/questions/{question_id}/threads",
    response_model=ThreadItem,
    status_code=status.HTTP_201_CREATED,
)
async def post_thread(
    question_id: UUID,
    request: ThreadAPIRequest,
    post_thread_use_case: FromDishka[PostThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadItem:
    """Answer a question."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await post_thread_use_case.execute(
            PostThreadRequest(
                question_id=str(question_id),
                author_id=user.user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "post thread")


@router.get("/threads/{thread_id}", response_model=ThreadItem)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadItem:
    """Get a thread."""
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except Exception as e:
        raise to_http_exception(e, "get thread")


@router.patch("/threads/{thread_id}", response_model=ThreadItem)
async def update_thread(
    thread_id: UUID,
    request: ThreadAPIRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadItem:
    """Edit a thread (author only)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await update_thread_use_case.execute(
            UpdateThreadRequest(
                thread_id=str(thread_id),
                user_id=user.user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update thread")


@router.delete("/threads/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: UUID,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteThreadResponse:
    """Delete a thread (author or admin)."""
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await delete_thread_use_case.execute(
            DeleteThreadRequest(thread_id=str(thread_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete thread")


@router.post("/threads/{thread_id}/solve", response_model=MarkAsSolvedResponse)
async def mark_as_solved(
    thread_id: UUID,
    mark_as_solved_use_case: FromDishka[MarkAsSolvedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MarkAsSolvedResponse:
    """Accept a thread as the solution of its question.

    Args:
        thread_id: Thread UUID
        mark_as_solved_use_case: Mark as solved use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        The answered question and its solution thread

    Raises:
        HTTPException: 403 unless question author or admin, 409 if the
            thread or question is already solved
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await mark_as_solved_use_case.execute(
            MarkAsSolvedRequest(thread_id=str(thread_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "mark thread as solved")
