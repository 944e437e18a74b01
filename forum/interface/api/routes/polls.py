"""Poll routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.poll import (
    GetPollRequest,
    GetPollResponse,
    GetPollUseCase,
    PollOptionTally,
    VotePollRequest,
    VotePollUseCase,
)
from forum.interface.api.auth import authenticate, authenticate_optional
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["polls"], route_class=DishkaRoute)


class VotePollAPIRequest(BaseModel):
    """API request for voting in a poll."""

    option_id: UUID


@router.post("/{post_id}/poll/vote", response_model=PollOptionTally)
async def vote_poll(
    post_id: UUID,
    request: VotePollAPIRequest,
    vote_poll_use_case: FromDishka[VotePollUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PollOptionTally:
    """Vote for a poll option.

    Voting for another option replaces the previous vote. Voting again for
    the same option is refused with 409.

    Returns:
        Tally of the chosen option with its voters
    """
    user = await authenticate(auth_token, get_current_user_use_case)

    try:
        return await vote_poll_use_case.execute(
            VotePollRequest(
                post_id=str(post_id),
                option_id=str(request.option_id),
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "vote in poll")


@router.get("/{post_id}/poll", response_model=GetPollResponse)
async def get_poll(
    post_id: UUID,
    get_poll_use_case: FromDishka[GetPollUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPollResponse:
    """Get a poll's options with their tallies and the viewer's vote."""
    user = await authenticate_optional(auth_token, get_current_user_use_case)

    try:
        return await get_poll_use_case.execute(
            GetPollRequest(
                post_id=str(post_id), viewer_id=user.user_id if user else None
            )
        )
    except Exception as e:
        raise to_http_exception(e, "get poll")
