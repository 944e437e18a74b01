"""Question and thread entities.

Questions mirror posts and threads mirror comments for the Q&A feature.
A question becomes ANSWERED only together with one of its threads becoming
the SOLUTION.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import QuestionId, QuestionStatus, ThreadId, ThreadStatus, UserId


class Question(DomainModel):
    """Question aggregate root."""

    id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    status: QuestionStatus = QuestionStatus.OPEN
    moderation_comment: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Thread(DomainModel):
    """Answer thread under a question."""

    id: ThreadId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    status: ThreadStatus = ThreadStatus.OPEN
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
