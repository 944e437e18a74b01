"""Question and thread use cases."""

from .ask_question import AskQuestionRequest, AskQuestionUseCase, QuestionItem, ThreadItem
from .list_questions import (
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .mark_as_solved import MarkAsSolvedRequest, MarkAsSolvedResponse, MarkAsSolvedUseCase
from .thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    PostThreadRequest,
    PostThreadUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from .update_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)

__all__ = [
    "AskQuestionRequest",
    "AskQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "MarkAsSolvedRequest",
    "MarkAsSolvedResponse",
    "MarkAsSolvedUseCase",
    "PostThreadRequest",
    "PostThreadUseCase",
    "QuestionItem",
    "ThreadItem",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
]
