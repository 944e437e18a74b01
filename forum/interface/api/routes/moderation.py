"""Moderation routes (admin only)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.moderation import (
    ModerateContentRequest,
    ModerateContentResponse,
    ModerateContentUseCase,
)
from forum.domain.value import ModerationTarget
from forum.interface.api.auth import authenticate, require_admin
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


class ModerateAPIRequest(BaseModel):
    """API request for a status change.

    ``comment`` is the moderation note (the reason, for comments).
    """

    status: str = Field(min_length=1, max_length=50)
    comment: str | None = Field(default=None, max_length=1000)


@router.patch("/{target}/{target_id}", response_model=ModerateContentResponse)
async def moderate(
    target: ModerationTarget,
    target_id: UUID,
    request: ModerateAPIRequest,
    moderate_content_use_case: FromDishka[ModerateContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ModerateContentResponse:
    """Set the status of a post, comment, question or bug report.

    Args:
        target: Kind of entity (``post``, ``comment``, ``question``, ``bug_report``)
        target_id: Entity UUID
        request: New status and optional note
        moderate_content_use_case: Moderate content use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        The entity's new status and note

    Raises:
        HTTPException: 403 for non-admins, 400 for a status the target
            does not have, 404 if the entity doesn't exist
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    require_admin(user)

    try:
        return await moderate_content_use_case.execute(
            ModerateContentRequest(
                actor_id=user.user_id,
                target=target,
                target_id=str(target_id),
                status=request.status,
                comment=request.comment,
            )
        )
    except Exception as e:
        raise to_http_exception(e, f"moderate {target.value}")
