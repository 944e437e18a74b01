"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.poll import PollOption, PollVote
from forum.domain.value import PollOptionId, PollVoteId, PostId, UserId


class PollRepository(ABC):
    """Repository for poll options and poll votes of a post."""

    @abstractmethod
    async def find_options(self, post_id: PostId) -> List[PollOption]:
        """List a post's poll options in creation order.

        Args:
            post_id: The poll post's ID

        Returns:
            List of options
        """
        pass

    @abstractmethod
    async def find_option(self, option_id: PollOptionId) -> Optional[PollOption]:
        """Find a poll option by ID."""
        pass

    @abstractmethod
    async def save_options(self, options: List[PollOption]) -> List[PollOption]:
        """Create several poll options at once.

        Args:
            options: Options to create

        Returns:
            The saved options
        """
        pass

    @abstractmethod
    async def delete_options(self, post_id: PostId) -> int:
        """Delete all options of a post together with their votes.

        Returns:
            Number of options deleted
        """
        pass

    @abstractmethod
    async def find_vote(self, user_id: UserId, post_id: PostId) -> Optional[PollVote]:
        """Find a user's vote on a poll post.

        Args:
            user_id: The voter's ID
            post_id: The poll post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_votes_by_option(self, option_id: PollOptionId) -> List[PollVote]:
        """List votes cast for an option, oldest first."""
        pass

    @abstractmethod
    async def save_vote(self, vote: PollVote) -> PollVote:
        """Save a poll vote (create).

        Raises:
            IntegrityError: If the user already voted on the post
        """
        pass

    @abstractmethod
    async def delete_vote(self, vote_id: PollVoteId) -> bool:
        """Delete a poll vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass
