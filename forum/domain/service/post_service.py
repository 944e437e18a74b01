"""Post domain service."""

from collections import Counter
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from forum.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from forum.domain.model import Image, PollOption, Post, User
from forum.domain.repository import ImageRepository, PollRepository, PostRepository
from forum.domain.value import (
    ContentStatus,
    ImageId,
    PointType,
    PollOptionId,
    PostId,
    PostType,
    UserId,
)

from .base import Service
from .points_service import PointsService


def poll_options_changed(existing: Sequence[str], new: Sequence[str]) -> bool:
    """Whether a poll's option texts differ by count or membership.

    Reordering the same options is not a change; repeated texts are
    counted, so ["a", "b"] -> ["a", "a"] is.
    """
    return Counter(existing) != Counter(new)


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        poll_repository: PollRepository,
        image_repository: ImageRepository,
        points_service: PointsService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            poll_repository: Poll repository (options of poll posts)
            image_repository: Image repository (image of image posts)
            points_service: Points domain service
        """
        self.post_repository = post_repository
        self.poll_repository = poll_repository
        self.image_repository = image_repository
        self.points_service = points_service

    async def create_post(
        self,
        author_id: UserId,
        content: str,
        type: PostType = PostType.TEXT,
        poll_options: Sequence[str] = (),
    ) -> Post:
        """Create a post and credit its author.

        For POLL posts one option row is created per entry of
        ``poll_options``; an empty list creates none.

        Args:
            author_id: Author user ID
            content: Post body
            type: Post type
            poll_options: Option texts for poll posts

        Returns:
            The created post
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            type=type.value,
            option_count=len(poll_options),
        ):
            if type == PostType.TEXT and not content.strip():
                raise ValidationError("Text posts require content")

            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                content=content,
                type=type,
                status=ContentStatus.ACTIVE,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)

            if type == PostType.POLL:
                await self._create_poll_options(saved.id, poll_options)

            await self.points_service.award(author_id, PointType.CREATE_POST)

            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author_id=str(author_id),
                type=type.value,
            )
            return saved

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        poll_options: Sequence[str] | None = None,
    ) -> Post:
        """Update a post's content and, for polls, its options.

        When the option texts differ from the existing ones (by count or
        membership) every existing option is deleted, votes included, and
        the new set is created.

        Args:
            post_id: Post to update
            user_id: User performing the update (must be the author)
            content: New content
            poll_options: New option texts; None leaves options untouched

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized post update attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                    author_id=str(post.author_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            updated = await self.post_repository.save(
                post.model_copy(update={"content": content, "updated_at": datetime.now()})
            )

            if post.type == PostType.POLL and poll_options is not None:
                existing = await self.poll_repository.find_options(post_id)
                if poll_options_changed([o.text for o in existing], poll_options):
                    removed = await self.poll_repository.delete_options(post_id)
                    await self._create_poll_options(post_id, poll_options)
                    logfire.info(
                        "Poll options replaced",
                        post_id=str(post_id),
                        removed=removed,
                        created=len(poll_options),
                    )

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post or post.status == ContentStatus.DELETED:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self, limit: int = 30, offset: int = 0, include_hidden: bool = False
    ) -> list[Post]:
        """List posts newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            return await self.post_repository.find_all(
                include_hidden=include_hidden, limit=limit, offset=offset
            )

    async def list_posts_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Post]:
        return await self.post_repository.find_by_author(
            author_id, limit=limit, offset=offset
        )

    async def delete_post(self, post_id: PostId, user: User) -> None:
        """Delete a post with everything attached to it.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user.id)
        ):
            post = await self.get_post(post_id)
            if post.author_id != user.id and not user.is_admin:
                raise NotAuthorizedError("post", str(post_id), str(user.id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id), by=str(user.id))

    async def get_image(self, post_id: PostId) -> Image | None:
        return await self.image_repository.find_by_post(post_id)

    async def replace_image(
        self, post_id: PostId, user_id: UserId, url: str, storage_key: str
    ) -> tuple[Image, Image | None]:
        """Attach a new image to a post, removing the previous one.

        Args:
            post_id: Post receiving the image
            user_id: User performing the change (must be the author)
            url: Public URL of the uploaded object
            storage_key: Object storage key of the upload

        Returns:
            The new image and the replaced one (if any)

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.replace_image", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            if post.author_id != user_id:
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            previous = await self.image_repository.delete_for_post(post_id)
            image = Image(
                id=ImageId(uuid4()),
                url=url,
                storage_key=storage_key,
                created_at=datetime.now(),
            )
            saved = await self.image_repository.save_for_post(image, post_id)
            logfire.info(
                "Post image replaced",
                post_id=str(post_id),
                image_id=str(saved.id),
                replaced=previous is not None,
            )
            return saved, previous

    async def _create_poll_options(
        self, post_id: PostId, texts: Sequence[str]
    ) -> list[PollOption]:
        if not texts:
            return []
        options = [
            PollOption(
                id=PollOptionId(uuid4()),
                post_id=post_id,
                text=text,
                created_at=datetime.now(),
            )
            for text in texts
        ]
        return await self.poll_repository.save_options(options)
