"""Moderation domain service.

Every operation has the same shape: look the target up by id, fail with
NotFoundError if it is absent, otherwise set its status and optional note.
Moderation has no side effects on the ledger or on notifications.

Questions are the exception to "any status": the lifecycle statuses
(open, updated, answered) must agree with whether the question has a
SOLUTION thread, so ANSWERED stays reachable only through mark_as_solved.
"""

from datetime import datetime

import logfire

from forum.domain.error import InvalidStateTransitionError, NotFoundError
from forum.domain.model import BugReport, Comment, Post, Question
from forum.domain.repository import (
    BugReportRepository,
    CommentRepository,
    PostRepository,
    QuestionRepository,
    ThreadRepository,
)
from forum.domain.value import (
    BugReportId,
    BugReportStatus,
    CommentId,
    ContentStatus,
    PostId,
    QuestionId,
    QuestionStatus,
)

from .base import Service


class ModerationService(Service):
    """Domain service for admin status changes."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
        bug_report_repository: BugReportRepository,
    ) -> None:
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.question_repository = question_repository
        self.thread_repository = thread_repository
        self.bug_report_repository = bug_report_repository

    async def update_post_status(
        self, post_id: PostId, status: ContentStatus, comment: str | None = None
    ) -> Post:
        """Set a post's moderation status and note.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "moderation_service.update_post_status",
            post_id=str(post_id),
            status=status.value,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))
            updated = await self.post_repository.save(
                post.model_copy(
                    update={
                        "status": status,
                        "moderation_comment": comment,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Post status updated", post_id=str(post_id), status=status.value
            )
            return updated

    async def update_comment_status(
        self, comment_id: CommentId, status: ContentStatus, reason: str | None = None
    ) -> Comment:
        """Set a comment's moderation status and reason.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "moderation_service.update_comment_status",
            comment_id=str(comment_id),
            status=status.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            updated = await self.comment_repository.save(
                comment.model_copy(
                    update={
                        "status": status,
                        "reason": reason,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Comment status updated",
                comment_id=str(comment_id),
                status=status.value,
            )
            return updated

    async def update_question_status(
        self,
        question_id: QuestionId,
        status: QuestionStatus,
        comment: str | None = None,
    ) -> Question:
        """Set a question's status and moderation note.

        Warning statuses can be set and lifted freely. Lifecycle statuses
        must match the solve state: ANSWERED only with a SOLUTION thread,
        OPEN or UPDATED only without one.

        Raises:
            NotFoundError: If the question doesn't exist
            InvalidStateTransitionError: If the lifecycle status contradicts
                the solve state
        """
        with logfire.span(
            "moderation_service.update_question_status",
            question_id=str(question_id),
            status=status.value,
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if not status.is_warning:
                solved = await self.thread_repository.has_solution(question_id)
                if solved != (status == QuestionStatus.ANSWERED):
                    logfire.warn(
                        "Question status contradicts solve state",
                        question_id=str(question_id),
                        status=status.value,
                        solved=solved,
                    )
                    raise InvalidStateTransitionError(
                        "question", question.status.value, status.value
                    )

            updated = await self.question_repository.save(
                question.model_copy(
                    update={
                        "status": status,
                        "moderation_comment": comment,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Question status updated",
                question_id=str(question_id),
                status=status.value,
            )
            return updated

    async def update_bug_status(
        self,
        report_id: BugReportId,
        status: BugReportStatus,
        comment: str | None = None,
    ) -> BugReport:
        """Set a bug report's status and comment.

        Raises:
            NotFoundError: If the report doesn't exist
        """
        with logfire.span(
            "moderation_service.update_bug_status",
            report_id=str(report_id),
            status=status.value,
        ):
            report = await self.bug_report_repository.find_by_id(report_id)
            if not report:
                raise NotFoundError("BugReport", str(report_id))
            updated = await self.bug_report_repository.save(
                report.model_copy(
                    update={
                        "status": status,
                        "comment": comment,
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info(
                "Bug report status updated",
                report_id=str(report_id),
                status=status.value,
            )
            return updated
