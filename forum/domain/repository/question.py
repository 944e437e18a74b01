"""Question and thread repository interfaces."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from forum.domain.model.question import Question, Thread
from forum.domain.value import QuestionId, QuestionStatus, ThreadId, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        exclude_statuses: Collection[QuestionStatus] = (),
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """List questions newest first.

        Args:
            exclude_statuses: Statuses to leave out
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        status: Optional[QuestionStatus] = None,
    ) -> List[Question]:
        """List an author's questions newest first.

        Args:
            author_id: The author's user ID
            status: Only return questions in this status

        Returns:
            List of questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and its threads.

        Returns:
            True if a question was deleted, False if none existed
        """
        pass


class ThreadRepository(ABC):
    """Repository for Thread entity."""

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Thread]:
        """List a question's threads, oldest first."""
        pass

    @abstractmethod
    async def has_solution(self, question_id: QuestionId) -> bool:
        """Whether any thread of the question is marked SOLUTION."""
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete a thread.

        Returns:
            True if a thread was deleted, False if none existed
        """
        pass
