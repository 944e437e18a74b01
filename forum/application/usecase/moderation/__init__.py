"""Moderation use cases."""

from .moderate_content import (
    ModerateContentRequest,
    ModerateContentResponse,
    ModerateContentUseCase,
)

__all__ = [
    "ModerateContentRequest",
    "ModerateContentResponse",
    "ModerateContentUseCase",
]
