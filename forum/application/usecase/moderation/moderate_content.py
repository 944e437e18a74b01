"""Moderate content use case."""

from enum import Enum
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import ensure_admin
from forum.domain.error import ValidationError
from forum.domain.service import ModerationService, UserService
from forum.domain.value import (
    BugReportId,
    BugReportStatus,
    CommentId,
    ContentStatus,
    ModerationTarget,
    PostId,
    QuestionId,
    QuestionStatus,
    UserId,
)

_STATUS_TYPES: dict[ModerationTarget, type[Enum]] = {
    ModerationTarget.POST: ContentStatus,
    ModerationTarget.COMMENT: ContentStatus,
    ModerationTarget.QUESTION: QuestionStatus,
    ModerationTarget.BUG_REPORT: BugReportStatus,
}


class ModerateContentRequest(BaseModel):
    """Moderate content request."""

    actor_id: str  # From authenticated user
    target: ModerationTarget
    target_id: str
    status: str
    comment: Optional[str] = Field(default=None, max_length=1000)


class ModerateContentResponse(BaseModel):
    """The moderated entity's new status and note."""

    target: ModerationTarget
    target_id: str
    status: str
    comment: Optional[str]


class ModerateContentUseCase:
    """Use case for an admin changing the status of a post, comment,
    question or bug report.

    Moderation only sets the status and the note. It does not touch the
    point ledger and sends no notifications.
    """

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        """Initialize moderate content use case.

        Args:
            moderation_service: Moderation domain service
            user_service: User domain service
        """
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ModerateContentRequest) -> ModerateContentResponse:
        """Execute moderation flow.

        Raises:
            AdminRequiredError: If the actor is not an admin
            ValidationError: If the status is not valid for the target
            NotFoundError: If the target doesn't exist
            InvalidStateTransitionError: If a question lifecycle status
                contradicts whether it has a solution
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        ensure_admin(actor, f"moderate_{request.target.value}")

        status_type = _STATUS_TYPES[request.target]
        try:
            status = status_type(request.status)
        except ValueError:
            raise ValidationError(
                f"Invalid {request.target.value} status: {request.status}"
            )

        target_id = UUID(request.target_id)
        with logfire.span(
            "moderate_content.execute",
            target=request.target.value,
            target_id=request.target_id,
            actor_id=request.actor_id,
        ):
            if request.target == ModerationTarget.POST:
                post = await self.moderation_service.update_post_status(
                    PostId(target_id), status, request.comment  # type: ignore[arg-type]
                )
                note = post.moderation_comment
            elif request.target == ModerationTarget.COMMENT:
                comment = await self.moderation_service.update_comment_status(
                    CommentId(target_id), status, request.comment  # type: ignore[arg-type]
                )
                note = comment.reason
            elif request.target == ModerationTarget.QUESTION:
                question = await self.moderation_service.update_question_status(
                    QuestionId(target_id), status, request.comment  # type: ignore[arg-type]
                )
                note = question.moderation_comment
            else:
                report = await self.moderation_service.update_bug_status(
                    BugReportId(target_id), status, request.comment  # type: ignore[arg-type]
                )
                note = report.comment

        return ModerateContentResponse(
            target=request.target,
            target_id=request.target_id,
            status=status.value,
            comment=note,
        )
