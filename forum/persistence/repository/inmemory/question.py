"""In-memory question and thread repositories for testing."""

from typing import Collection, List, Optional

from forum.domain.model.question import Question, Thread
from forum.domain.repository.question import QuestionRepository, ThreadRepository
from forum.domain.value import QuestionId, QuestionStatus, ThreadId, ThreadStatus, UserId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        return self._threads.get(thread_id)

    async def find_by_question(self, question_id: QuestionId) -> List[Thread]:
        threads = [t for t in self._threads.values() if t.question_id == question_id]
        return sorted(threads, key=lambda t: t.created_at)

    async def has_solution(self, question_id: QuestionId) -> bool:
        return any(
            t.question_id == question_id and t.status == ThreadStatus.SOLUTION
            for t in self._threads.values()
        )

    async def save(self, thread: Thread) -> Thread:
        self._threads[thread.id] = thread
        return thread

    async def delete(self, thread_id: ThreadId) -> bool:
        return self._threads.pop(thread_id, None) is not None

    def delete_for_question(self, question_id: QuestionId) -> None:
        self._threads = {
            k: t for k, t in self._threads.items() if t.question_id != question_id
        }


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Deleting a question removes its threads from the linked thread
    repository, mirroring the database cascade.
    """

    def __init__(self, thread_repository: InMemoryThreadRepository) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._thread_repository = thread_repository

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self._questions.get(question_id)

    async def find_all(
        self,
        exclude_statuses: Collection[QuestionStatus] = (),
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        questions = [
            q for q in self._questions.values() if q.status not in exclude_statuses
        ]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def find_by_author(
        self,
        author_id: UserId,
        status: Optional[QuestionStatus] = None,
    ) -> List[Question]:
        questions = [
            q
            for q in self._questions.values()
            if q.author_id == author_id and (status is None or q.status == status)
        ]
        return sorted(questions, key=lambda q: q.created_at, reverse=True)

    async def save(self, question: Question) -> Question:
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        if self._questions.pop(question_id, None) is None:
            return False
        self._thread_repository.delete_for_question(question_id)
        return True
