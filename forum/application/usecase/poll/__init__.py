"""Poll use cases."""

from .vote_poll import (
    GetPollRequest,
    GetPollResponse,
    GetPollUseCase,
    PollOptionTally,
    PollVoter,
    VotePollRequest,
    VotePollUseCase,
)

__all__ = [
    "GetPollRequest",
    "GetPollResponse",
    "GetPollUseCase",
    "PollOptionTally",
    "PollVoter",
    "VotePollRequest",
    "VotePollUseCase",
]
