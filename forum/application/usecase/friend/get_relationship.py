"""Get relationship use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import FriendService
from forum.domain.value import RelationshipState, UserId


class GetRelationshipRequest(BaseModel):
    """Get relationship request."""

    user_id: str  # From authenticated user
    other_id: str


class GetRelationshipResponse(BaseModel):
    """Relationship between the current user and another user."""

    other_id: str
    state: RelationshipState


class GetRelationshipUseCase:
    """Use case for querying the relationship state with another user."""

    def __init__(self, friend_service: FriendService) -> None:
        self.friend_service = friend_service

    async def execute(self, request: GetRelationshipRequest) -> GetRelationshipResponse:
        state = await self.friend_service.query_relationship(
            UserId(UUID(request.user_id)), UserId(UUID(request.other_id))
        )
        return GetRelationshipResponse(other_id=request.other_id, state=state)
