"""Poll domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ConflictError, NotFoundError, ValidationError
from forum.domain.model import PollOption, PollVote, Post, User
from forum.domain.repository import PollRepository, PostRepository, UserRepository
from forum.domain.value import (
    ContentStatus,
    PollOptionId,
    PollVoteId,
    PostId,
    PostType,
    UserId,
)

from .base import Service


@dataclass
class PollTally:
    """An option with the votes cast for it and who cast them."""

    option: PollOption
    votes: list[PollVote]
    voters: list[User]

    @property
    def vote_count(self) -> int:
        return len(self.votes)


class PollService(Service):
    """Domain service for voting on poll posts.

    A user holds at most one vote per poll. Voting for another option
    replaces the old vote (delete then create); voting for the same option
    again is rejected and changes nothing.
    """

    def __init__(
        self,
        poll_repository: PollRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.poll_repository = poll_repository
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def vote(
        self, user_id: UserId, post_id: PostId, option_id: PollOptionId
    ) -> PollTally:
        """Vote for a poll option.

        Args:
            user_id: Voting user
            post_id: Poll post
            option_id: Chosen option

        Returns:
            Tally of the chosen option after the vote

        Raises:
            NotFoundError: If the post or option doesn't exist
            ValidationError: If the post is not a poll
            ConflictError: If the user already voted for this option
        """
        with logfire.span(
            "poll_service.vote",
            user_id=str(user_id),
            post_id=str(post_id),
            option_id=str(option_id),
        ):
            await self._get_poll_post(post_id)

            option = await self.poll_repository.find_option(option_id)
            if not option or option.post_id != post_id:
                raise NotFoundError("PollOption", str(option_id))

            existing = await self.poll_repository.find_vote(user_id, post_id)
            if existing:
                if existing.option_id == option_id:
                    logfire.info(
                        "Vote unchanged", user_id=str(user_id), post_id=str(post_id)
                    )
                    raise ConflictError("Already voted for this option")
                await self.poll_repository.delete_vote(existing.id)
                logfire.info(
                    "Previous vote removed",
                    user_id=str(user_id),
                    post_id=str(post_id),
                    previous_option_id=str(existing.option_id),
                )

            vote = PollVote(
                id=PollVoteId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                option_id=option_id,
                created_at=datetime.now(),
            )
            try:
                await self.poll_repository.save_vote(vote)
            except IntegrityError:
                logfire.warn(
                    "Concurrent poll vote", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("Already voted on this poll")

            return await self._tally(option)

    async def get_poll(self, post_id: PostId) -> list[PollTally]:
        """Tallies of every option of a poll, in option order."""
        await self._get_poll_post(post_id)
        options = await self.poll_repository.find_options(post_id)
        return [await self._tally(option) for option in options]

    async def get_user_vote(self, user_id: UserId, post_id: PostId) -> PollVote | None:
        return await self.poll_repository.find_vote(user_id, post_id)

    async def _tally(self, option: PollOption) -> PollTally:
        votes = await self.poll_repository.find_votes_by_option(option.id)
        users = await self.user_repository.find_by_ids([v.user_id for v in votes])
        by_id = {u.id: u for u in users}
        voters = [by_id[v.user_id] for v in votes if v.user_id in by_id]
        return PollTally(option=option, votes=votes, voters=voters)

    async def _get_poll_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post or post.status == ContentStatus.DELETED:
            raise NotFoundError("Post", str(post_id))
        if post.type != PostType.POLL:
            raise ValidationError("Post is not a poll")
        return post
