"""Unit tests for PollService and poll option updates."""

from uuid import uuid4

import pytest

from forum.domain.error import ConflictError, NotFoundError, ValidationError
from forum.domain.repository import PollRepository, UserRepository
from forum.domain.service import PollService, PostService
from forum.domain.service.post_service import poll_options_changed
from forum.domain.value import PollOptionId, PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _poll(unit_env, options=("Red", "Blue")):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    poll_repo = await unit_env.get(PollRepository)
    author = await user_repo.save(make_user("author"))
    voter = await user_repo.save(make_user("voter"))
    post = await post_service.create_post(
        author.id, "Favourite colour?", type=PostType.POLL, poll_options=list(options)
    )
    return author, voter, post, await poll_repo.find_options(post.id)


class TestVote:
    """Tests for vote method."""

    @pytest.mark.asyncio
    async def test_vote_records_voter_on_option(self, unit_env):
        """Voting should count the vote and list the voter."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        _, voter, post, options = await _poll(unit_env)

        # Act
        tally = await poll_service.vote(voter.id, post.id, options[0].id)

        # Assert
        assert tally.option.id == options[0].id
        assert tally.vote_count == 1
        assert [u.id for u in tally.voters] == [voter.id]

    @pytest.mark.asyncio
    async def test_vote_for_other_option_replaces_previous_vote(self, unit_env):
        """A user keeps at most one vote per poll."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        _, voter, post, options = await _poll(unit_env)
        await poll_service.vote(voter.id, post.id, options[0].id)

        # Act
        await poll_service.vote(voter.id, post.id, options[1].id)

        # Assert
        tallies = {t.option.id: t.vote_count for t in await poll_service.get_poll(post.id)}
        assert tallies == {options[0].id: 0, options[1].id: 1}
        vote = await poll_service.get_user_vote(voter.id, post.id)
        assert vote.option_id == options[1].id

    @pytest.mark.asyncio
    async def test_vote_for_same_option_again_raises_conflict(self, unit_env):
        """Re-voting for the same option is rejected and changes nothing."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        _, voter, post, options = await _poll(unit_env)
        first = await poll_service.vote(voter.id, post.id, options[0].id)

        # Act & Assert
        with pytest.raises(ConflictError):
            await poll_service.vote(voter.id, post.id, options[0].id)

        vote = await poll_service.get_user_vote(voter.id, post.id)
        assert vote.id == first.votes[0].id

    @pytest.mark.asyncio
    async def test_vote_for_option_of_another_poll_raises_not_found(self, unit_env):
        """The option must belong to the voted poll."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        _, voter, post, _ = await _poll(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await poll_service.vote(voter.id, post.id, PollOptionId(uuid4()))

    @pytest.mark.asyncio
    async def test_vote_on_text_post_raises_validation_error(self, unit_env):
        """Only poll posts can be voted on."""
        # Arrange
        poll_service = await unit_env.get(PollService)
        post_service = await unit_env.get(PostService)
        author, voter, _, options = await _poll(unit_env)
        text_post = await post_service.create_post(author.id, "Just text")

        # Act & Assert
        with pytest.raises(ValidationError):
            await poll_service.vote(voter.id, text_post.id, options[0].id)


class TestUpdatePollOptions:
    """Tests for replacing poll options on post update."""

    @pytest.mark.asyncio
    async def test_changed_options_replace_existing_ones(self, unit_env):
        """New option texts should replace the old options and their votes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        poll_service = await unit_env.get(PollService)
        author, voter, post, options = await _poll(unit_env)
        await poll_service.vote(voter.id, post.id, options[0].id)

        # Act
        await post_service.update_post(
            post.id, author.id, "Favourite colour?", poll_options=["Green", "Blue"]
        )

        # Assert
        tallies = await poll_service.get_poll(post.id)
        assert sorted(t.option.text for t in tallies) == ["Blue", "Green"]
        assert all(t.vote_count == 0 for t in tallies)
        assert await poll_service.get_user_vote(voter.id, post.id) is None

    @pytest.mark.asyncio
    async def test_reordered_options_are_kept(self, unit_env):
        """Reordering the same options keeps option ids and votes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        poll_service = await unit_env.get(PollService)
        author, voter, post, options = await _poll(unit_env)
        await poll_service.vote(voter.id, post.id, options[0].id)

        # Act
        await post_service.update_post(
            post.id, author.id, "Favourite colour?", poll_options=["Blue", "Red"]
        )

        # Assert
        tallies = await poll_service.get_poll(post.id)
        assert {t.option.id for t in tallies} == {o.id for o in options}
        assert sum(t.vote_count for t in tallies) == 1

    def test_poll_options_changed_compares_count_and_membership(self):
        """Order does not matter, count and membership do."""
        assert not poll_options_changed(["a", "b"], ["b", "a"])
        assert poll_options_changed(["a", "b"], ["a", "b", "c"])
        assert poll_options_changed(["a", "b"], ["a", "c"])
        assert poll_options_changed(["a"], [])
        assert poll_options_changed(["a", "b"], ["a", "a"])
        assert not poll_options_changed(["a", "a", "b"], ["a", "b", "a"])
