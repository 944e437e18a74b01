"""Poll vote use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PollService, PollTally
from forum.domain.value import PollOptionId, PostId, UserId


class VotePollRequest(BaseModel):
    """Vote request."""

    post_id: str
    option_id: str
    user_id: str  # From authenticated user


class PollVoter(BaseModel):
    """A user who voted for an option."""

    user_id: str
    username: str
    profile_picture: str | None


class PollOptionTally(BaseModel):
    """An option with its vote count and voters."""

    option_id: str
    text: str
    vote_count: int
    voters: list[PollVoter]

    @classmethod
    def from_tally(cls, tally: PollTally) -> "PollOptionTally":
        return cls(
            option_id=str(tally.option.id),
            text=tally.option.text,
            vote_count=tally.vote_count,
            voters=[
                PollVoter(
                    user_id=str(user.id),
                    username=user.username.root,
                    profile_picture=user.profile_picture,
                )
                for user in tally.voters
            ],
        )


class VotePollUseCase:
    """Use case for voting on a poll post.

    Voting for a different option moves the user's vote; voting for the
    same option again is a conflict.
    """

    def __init__(self, poll_service: PollService) -> None:
        """Initialize vote poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: VotePollRequest) -> PollOptionTally:
        """Execute vote flow.

        Returns:
            Tally of the option voted for

        Raises:
            NotFoundError: If the post or option doesn't exist
            ValidationError: If the post is not a poll
            ConflictError: If the user already voted for this option
        """
        tally = await self.poll_service.vote(
            UserId(UUID(request.user_id)),
            PostId(UUID(request.post_id)),
            PollOptionId(UUID(request.option_id)),
        )
        return PollOptionTally.from_tally(tally)


class GetPollRequest(BaseModel):
    """Get poll request."""

    post_id: str
    viewer_id: str | None = None


class GetPollResponse(BaseModel):
    """Poll results."""

    post_id: str
    options: list[PollOptionTally]
    total_votes: int
    viewer_option_id: str | None  # Option the viewer voted for, if any


class GetPollUseCase:
    """Use case for reading poll results."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: GetPollRequest) -> GetPollResponse:
        post_id = PostId(UUID(request.post_id))
        tallies = await self.poll_service.get_poll(post_id)

        viewer_vote = None
        if request.viewer_id:
            viewer_vote = await self.poll_service.get_user_vote(
                UserId(UUID(request.viewer_id)), post_id
            )

        return GetPollResponse(
            post_id=request.post_id,
            options=[PollOptionTally.from_tally(t) for t in tallies],
            total_votes=sum(t.vote_count for t in tallies),
            viewer_option_id=str(viewer_vote.option_id) if viewer_vote else None,
        )
