"""Unit tests for QuestionService."""

import pytest

from forum.domain.error import InvalidStateTransitionError, NotAuthorizedError
from forum.domain.repository import QuestionRepository, ThreadRepository, UserRepository
from forum.domain.service import QuestionService
from forum.domain.value import QuestionStatus, ThreadStatus, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _question_with_thread(unit_env):
    user_repo = await unit_env.get(UserRepository)
    question_service = await unit_env.get(QuestionService)
    asker = await user_repo.save(make_user("asker"))
    helper = await user_repo.save(make_user("helper"))
    question = await question_service.ask_question(
        asker.id, "How do I sort a dict?", "By value, descending."
    )
    thread = await question_service.post_thread(
        question.id, helper.id, "sorted(d.items(), key=lambda kv: kv[1], reverse=True)"
    )
    return asker, helper, question, thread


class TestEditQuestion:
    """Tests for edit_question method."""

    @pytest.mark.asyncio
    async def test_edit_moves_open_question_to_updated(self, unit_env):
        """Editing an OPEN question should mark it UPDATED."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        asker, _, question, _ = await _question_with_thread(unit_env)

        # Act
        updated = await question_service.edit_question(
            question.id, asker.id, title="How do I sort a dict by value?"
        )

        # Assert
        assert updated.status == QuestionStatus.UPDATED
        assert updated.title == "How do I sort a dict by value?"
        assert updated.content == question.content

    @pytest.mark.asyncio
    async def test_edit_by_other_user_raises_not_authorized(self, unit_env):
        """Only the author may edit."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        _, helper, question, _ = await _question_with_thread(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.edit_question(question.id, helper.id, content="x")


class TestMarkAsSolved:
    """Tests for mark_as_solved method."""

    @pytest.mark.asyncio
    async def test_mark_as_solved_updates_question_and_thread(self, unit_env):
        """The question becomes ANSWERED and the thread the SOLUTION."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        asker, _, question, thread = await _question_with_thread(unit_env)

        # Act
        answered, solution = await question_service.mark_as_solved(thread.id, asker)

        # Assert
        assert answered.status == QuestionStatus.ANSWERED
        assert solution.status == ThreadStatus.SOLUTION
        assert (await question_repo.find_by_id(question.id)).status == (
            QuestionStatus.ANSWERED
        )
        assert (await thread_repo.find_by_id(thread.id)).status == (
            ThreadStatus.SOLUTION
        )

    @pytest.mark.asyncio
    async def test_solving_twice_raises_and_leaves_state_unchanged(self, unit_env):
        """SOLUTION and ANSWERED are terminal for the solve workflow."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        asker, _, _, thread = await _question_with_thread(unit_env)
        await question_service.mark_as_solved(thread.id, asker)

        # Act & Assert
        with pytest.raises(InvalidStateTransitionError):
            await question_service.mark_as_solved(thread.id, asker)

    @pytest.mark.asyncio
    async def test_second_thread_cannot_solve_answered_question(self, unit_env):
        """Once answered, another thread cannot become a solution."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        asker, helper, question, thread = await _question_with_thread(unit_env)
        other = await question_service.post_thread(question.id, helper.id, "Or this")
        await question_service.mark_as_solved(thread.id, asker)

        # Act & Assert
        with pytest.raises(InvalidStateTransitionError):
            await question_service.mark_as_solved(other.id, asker)

        assert (await question_service.get_thread(other.id)).status == (
            ThreadStatus.OPEN
        )

    @pytest.mark.asyncio
    async def test_mark_as_solved_by_thread_author_raises_not_authorized(
        self, unit_env
    ):
        """Only the question author or an admin may pick the solution."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        _, helper, _, thread = await _question_with_thread(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.mark_as_solved(thread.id, helper)

    @pytest.mark.asyncio
    async def test_admin_can_mark_as_solved(self, unit_env):
        """Admins may close any question."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user("moderator", role=UserRole.ADMIN))
        _, _, _, thread = await _question_with_thread(unit_env)

        # Act
        answered, _ = await question_service.mark_as_solved(thread.id, admin)

        # Assert
        assert answered.status == QuestionStatus.ANSWERED


class TestListQuestions:
    """Tests for list_questions method."""

    @pytest.mark.asyncio
    async def test_flagged_questions_hidden_unless_requested(self, unit_env):
        """Warning statuses are left out of the default listing."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        _, _, question, _ = await _question_with_thread(unit_env)
        await question_repo.save(
            question.model_copy(update={"status": QuestionStatus.FLAGGED})
        )

        # Act
        public = await question_service.list_questions()
        everything = await question_service.list_questions(include_flagged=True)

        # Assert
        assert public == []
        assert [q.id for q in everything] == [question.id]
