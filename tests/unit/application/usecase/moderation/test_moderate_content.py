"""Unit tests for ModerateContentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.moderation import (
    ModerateContentRequest,
    ModerateContentUseCase,
)
from forum.domain.error import (
    AdminRequiredError,
    ConflictError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from forum.domain.repository import PostRepository, UserRepository
from forum.domain.service import PointsService, PostService, QuestionService
from forum.domain.value import (
    ContentStatus,
    ModerationTarget,
    QuestionStatus,
    ThreadStatus,
    UserRole,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _admin_and_author(unit_env):
    user_repo = await unit_env.get(UserRepository)
    admin = await user_repo.save(make_user("moderator", role=UserRole.ADMIN))
    author = await user_repo.save(make_user("author"))
    return admin, author


class TestModerateContentUseCase:
    """Tests for ModerateContentUseCase."""

    @pytest.mark.asyncio
    async def test_hide_post_sets_status_and_note(self, unit_env):
        """Admins can hide a post with a note."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        admin, author = await _admin_and_author(unit_env)
        post = await post_service.create_post(author.id, "Buy cheap watches")

        # Act
        response = await use_case.execute(
            ModerateContentRequest(
                actor_id=str(admin.id),
                target=ModerationTarget.POST,
                target_id=str(post.id),
                status="hidden",
                comment="Spam",
            )
        )

        # Assert
        assert response.status == "hidden"
        assert response.comment == "Spam"
        stored = await post_repo.find_by_id(post.id)
        assert stored.status == ContentStatus.HIDDEN
        assert stored.moderation_comment == "Spam"

    @pytest.mark.asyncio
    async def test_moderation_leaves_ledger_untouched(self, unit_env):
        """Moderating a post neither grants nor removes points."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        post_service = await unit_env.get(PostService)
        points_service = await unit_env.get(PointsService)
        admin, author = await _admin_and_author(unit_env)
        post = await post_service.create_post(author.id, "Borderline")
        total_before = await points_service.get_total(author.id)

        # Act
        await use_case.execute(
            ModerateContentRequest(
                actor_id=str(admin.id),
                target=ModerationTarget.POST,
                target_id=str(post.id),
                status="flagged",
            )
        )

        # Assert
        assert await points_service.get_total(author.id) == total_before

    @pytest.mark.asyncio
    async def test_question_status_uses_question_lifecycle(self, unit_env):
        """Questions accept their own statuses, e.g. suspended."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        question_service = await unit_env.get(QuestionService)
        admin, author = await _admin_and_author(unit_env)
        question = await question_service.ask_question(author.id, "Title", "Body")

        # Act
        await use_case.execute(
            ModerateContentRequest(
                actor_id=str(admin.id),
                target=ModerationTarget.QUESTION,
                target_id=str(question.id),
                status="suspended",
                comment="Off topic",
            )
        )

        # Assert
        stored = await question_service.get_question(question.id)
        assert stored.status == QuestionStatus.SUSPENDED
        assert stored.moderation_comment == "Off topic"

    @pytest.mark.asyncio
    async def test_status_of_other_target_raises_validation_error(self, unit_env):
        """'suspended' is a question status, not a post status."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        post_service = await unit_env.get(PostService)
        admin, author = await _admin_and_author(unit_env)
        post = await post_service.create_post(author.id, "Hello")

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                ModerateContentRequest(
                    actor_id=str(admin.id),
                    target=ModerationTarget.POST,
                    target_id=str(post.id),
                    status="suspended",
                )
            )

    @pytest.mark.asyncio
    async def test_non_admin_raises_admin_required(self, unit_env):
        """Regular users cannot moderate."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        post_service = await unit_env.get(PostService)
        _, author = await _admin_and_author(unit_env)
        post = await post_service.create_post(author.id, "Hello")

        # Act & Assert
        with pytest.raises(AdminRequiredError):
            await use_case.execute(
                ModerateContentRequest(
                    actor_id=str(author.id),
                    target=ModerationTarget.POST,
                    target_id=str(post.id),
                    status="hidden",
                )
            )

    @pytest.mark.asyncio
    async def test_missing_bug_report_raises_not_found(self, unit_env):
        """Unknown targets fail with NotFoundError."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        admin, _ = await _admin_and_author(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                ModerateContentRequest(
                    actor_id=str(admin.id),
                    target=ModerationTarget.BUG_REPORT,
                    target_id=str(uuid4()),
                    status="resolved",
                )
            )

    @pytest.mark.asyncio
    async def test_answered_without_solution_raises_invalid_transition(
        self, unit_env
    ):
        """ANSWERED is only reachable by solving a thread."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        question_service = await unit_env.get(QuestionService)
        admin, author = await _admin_and_author(unit_env)
        question = await question_service.ask_question(author.id, "Title", "Body")
        thread = await question_service.post_thread(question.id, admin.id, "Reply")

        # Act & Assert
        with pytest.raises(InvalidStateTransitionError):
            await use_case.execute(
                ModerateContentRequest(
                    actor_id=str(admin.id),
                    target=ModerationTarget.QUESTION,
                    target_id=str(question.id),
                    status="answered",
                )
            )

        stored = await question_service.get_question(question.id)
        assert stored.status == QuestionStatus.OPEN
        assert (await question_service.get_thread(thread.id)).status == ThreadStatus.OPEN

    @pytest.mark.asyncio
    async def test_reopening_solved_question_raises_invalid_transition(
        self, unit_env
    ):
        """A solved question cannot be moved back to open and solved again."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        question_service = await unit_env.get(QuestionService)
        admin, author = await _admin_and_author(unit_env)
        question = await question_service.ask_question(author.id, "Title", "Body")
        first = await question_service.post_thread(question.id, admin.id, "One")
        second = await question_service.post_thread(question.id, admin.id, "Two")
        await question_service.mark_as_solved(first.id, author)

        # Act & Assert
        with pytest.raises(InvalidStateTransitionError):
            await use_case.execute(
                ModerateContentRequest(
                    actor_id=str(admin.id),
                    target=ModerationTarget.QUESTION,
                    target_id=str(question.id),
                    status="open",
                )
            )
        with pytest.raises(ConflictError):
            await question_service.mark_as_solved(second.id, author)

        threads = await question_service.get_threads(question.id)
        assert [t.id for t in threads if t.status == ThreadStatus.SOLUTION] == [
            first.id
        ]
        stored = await question_service.get_question(question.id)
        assert stored.status == QuestionStatus.ANSWERED

    @pytest.mark.asyncio
    async def test_flag_detour_cannot_reopen_solved_question(self, unit_env):
        """Lifting a flag restores ANSWERED; OPEN stays unreachable."""
        # Arrange
        use_case = await unit_env.get(ModerateContentUseCase)
        question_service = await unit_env.get(QuestionService)
        admin, author = await _admin_and_author(unit_env)
        question = await question_service.ask_question(author.id, "Title", "Body")
        thread = await question_service.post_thread(question.id, admin.id, "Answer")
        await question_service.mark_as_solved(thread.id, author)

        def moderate(status: str) -> ModerateContentRequest:
            return ModerateContentRequest(
                actor_id=str(admin.id),
                target=ModerationTarget.QUESTION,
                target_id=str(question.id),
                status=status,
            )

        # Act
        await use_case.execute(moderate("flagged"))
        with pytest.raises(InvalidStateTransitionError):
            await use_case.execute(moderate("open"))
        await use_case.execute(moderate("answered"))

        # Assert
        stored = await question_service.get_question(question.id)
        assert stored.status == QuestionStatus.ANSWERED
