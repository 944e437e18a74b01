"""In-memory poll repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.poll import PollOption, PollVote
from forum.domain.repository.poll import PollRepository
from forum.domain.value import PollOptionId, PollVoteId, PostId, UserId


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._options: list[PollOption] = []
        self._votes: list[PollVote] = []

    async def find_options(self, post_id: PostId) -> List[PollOption]:
        return [o for o in self._options if o.post_id == post_id]

    async def find_option(self, option_id: PollOptionId) -> Optional[PollOption]:
        for option in self._options:
            if option.id == option_id:
                return option
        return None

    async def save_options(self, options: List[PollOption]) -> List[PollOption]:
        self._options.extend(options)
        return options

    async def delete_options(self, post_id: PostId) -> int:
        """Delete a post's options and, like the FK cascade, their votes."""
        removed = {o.id for o in self._options if o.post_id == post_id}
        self._options = [o for o in self._options if o.id not in removed]
        self._votes = [v for v in self._votes if v.option_id not in removed]
        return len(removed)

    async def find_vote(self, user_id: UserId, post_id: PostId) -> Optional[PollVote]:
        for vote in self._votes:
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_votes_by_option(self, option_id: PollOptionId) -> List[PollVote]:
        return [v for v in self._votes if v.option_id == option_id]

    async def save_vote(self, vote: PollVote) -> PollVote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the post
        """
        if await self.find_vote(vote.user_id, vote.post_id):
            raise IntegrityError("Duplicate poll vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_vote(self, vote_id: PollVoteId) -> bool:
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.id != vote_id]
        return len(self._votes) < before
