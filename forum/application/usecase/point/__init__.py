"""Point use cases."""

from .award_points import (
    AwardPointsRequest,
    AwardPointsResponse,
    AwardPointsUseCase,
    GetPointsRequest,
    GetPointsResponse,
    GetPointsUseCase,
)

__all__ = [
    "AwardPointsRequest",
    "AwardPointsResponse",
    "AwardPointsUseCase",
    "GetPointsRequest",
    "GetPointsResponse",
    "GetPointsUseCase",
]
