"""Uploaded image entities."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ImageId, PostId


class Image(DomainModel):
    """An uploaded object and the public URL it is served from."""

    id: ImageId
    url: str = Field(min_length=1, max_length=1000)
    storage_key: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)


class PostImage(DomainModel):
    """Link between a post and its (single) image."""

    post_id: PostId
    image_id: ImageId
    created_at: datetime = Field(default_factory=datetime.now)
