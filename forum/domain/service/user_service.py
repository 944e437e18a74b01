"""User domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import User
from forum.domain.repository import (
    FriendshipRepository,
    QuestionRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.value import QuestionStatus, UserId, UserRole
from forum.domain.value.types import Username

from .points_service import PointsService


@dataclass
class UserSummary:
    """Admin view of a user."""

    user: User
    total_friends: int
    total_points: int


@dataclass
class EnrolledUserSummary:
    """Admin view of an enrolled user.

    ``solved_questions`` counts the user's ANSWERED questions that have a
    SOLUTION thread.
    """

    user: User
    total_points: int
    solved_questions: int


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        friendship_repository: FriendshipRepository,
        question_repository: QuestionRepository,
        thread_repository: ThreadRepository,
        points_service: PointsService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            friendship_repository: Friendship repository (friend counts)
            question_repository: Question repository (solved counts)
            thread_repository: Thread repository (solved counts)
            points_service: Points domain service (totals)
        """
        self.user_repository = user_repository
        self.friendship_repository = friendship_repository
        self.question_repository = question_repository
        self.thread_repository = thread_repository
        self.points_service = points_service

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_external_id(self, external_id: str) -> User:
        """Get user by identity provider id.

        Raises:
            NotFoundError: If no user has this external id
        """
        with logfire.span("user_service.get_by_external_id", external_id=external_id):
            user = await self.user_repository.find_by_external_id(external_id)
            if not user:
                logfire.warn("User not found", external_id=external_id)
                raise NotFoundError("User", external_id)
            return user

    async def sync_user(
        self,
        external_id: str,
        username: Username,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_picture: str | None = None,
    ) -> tuple[User, bool]:
        """Create the user for an identity-provider account if missing.

        Args:
            external_id: Identity provider user id
            username: Username chosen at the provider
            email: Primary email
            first_name: First name
            last_name: Last name
            profile_picture: Avatar URL

        Returns:
            The user and whether it was created by this call

        Raises:
            ConflictError: If the username belongs to another account
        """
        with logfire.span(
            "user_service.sync_user", external_id=external_id, username=username.root
        ):
            existing = await self.user_repository.find_by_external_id(external_id)
            if existing:
                logfire.info("User already synced", user_id=str(existing.id))
                return existing, False

            await self._ensure_username_free(username)

            user = User(
                id=UserId(uuid4()),
                external_id=external_id,
                username=username,
                email=email,
                first_name=first_name,
                last_name=last_name,
                profile_picture=profile_picture,
                role=UserRole.USER,
                created_at=datetime.now(),
                updated_at=datetime.now(),
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("User sync collided", external_id=external_id)
                raise ConflictError("User already exists")

            logfire.info("User created", user_id=str(saved.id), username=username.root)
            return saved, True

    async def update_profile(
        self,
        user_id: UserId,
        username: Username | None = None,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_picture: str | None = None,
    ) -> User:
        """Update the given profile fields of a user.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new username is taken
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            changes: dict = {"updated_at": datetime.now()}
            if username is not None and username != user.username:
                await self._ensure_username_free(username)
                changes["username"] = username
            if email is not None:
                changes["email"] = email
            if first_name is not None:
                changes["first_name"] = first_name
            if last_name is not None:
                changes["last_name"] = last_name
            if profile_picture is not None:
                changes["profile_picture"] = profile_picture

            updated = await self.user_repository.save(user.model_copy(update=changes))
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return updated

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and everything they own.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))

    async def get_total_points(self, user_id: UserId) -> int:
        return await self.points_service.get_total(user_id)

    async def list_users(self, limit: int = 100, offset: int = 0) -> list[UserSummary]:
        """All users with friend counts and point totals."""
        with logfire.span("user_service.list_users", limit=limit, offset=offset):
            users = await self.user_repository.find_all(limit=limit, offset=offset)
            totals = await self.points_service.get_totals([u.id for u in users])
            return [
                UserSummary(
                    user=user,
                    total_friends=await self.friendship_repository.count_by_user(
                        user.id
                    ),
                    total_points=totals.get(user.id, 0),
                )
                for user in users
            ]

    async def list_enrolled_users(self) -> list[EnrolledUserSummary]:
        """Enrolled users with point totals and solved question counts."""
        with logfire.span("user_service.list_enrolled_users"):
            users = await self.user_repository.find_all(enrolled_only=True, limit=1000)
            totals = await self.points_service.get_totals([u.id for u in users])
            return [
                EnrolledUserSummary(
                    user=user,
                    total_points=totals.get(user.id, 0),
                    solved_questions=await self._count_solved_questions(user.id),
                )
                for user in users
            ]

    async def set_enrollment(self, user_id: UserId, enrolled: bool) -> User:
        return await self._set_flag(user_id, "is_enrolled", enrolled)

    async def set_ban(self, user_id: UserId, banned: bool) -> User:
        return await self._set_flag(user_id, "is_banned", banned)

    async def _set_flag(self, user_id: UserId, flag: str, value: bool) -> User:
        with logfire.span(
            "user_service.set_flag", user_id=str(user_id), flag=flag, value=value
        ):
            user = await self.get_by_id(user_id)
            updated = await self.user_repository.save(
                user.model_copy(update={flag: value, "updated_at": datetime.now()})
            )
            logfire.info("User flag updated", user_id=str(user_id), flag=flag, value=value)
            return updated

    async def _count_solved_questions(self, user_id: UserId) -> int:
        answered = await self.question_repository.find_by_author(
            user_id, status=QuestionStatus.ANSWERED
        )
        solved = 0
        for question in answered:
            if await self.thread_repository.has_solution(question.id):
                solved += 1
        return solved

    async def _ensure_username_free(self, username: Username) -> None:
        if await self.user_repository.find_by_username(username):
            logfire.warn("Username taken", username=username.root)
            raise ConflictError(f"Username {username.root} is already taken")
