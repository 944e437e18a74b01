"""Object storage client for uploaded post images.

Talks to any S3-compatible service (AWS S3, MinIO) through boto3.
"""

import asyncio
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import uuid4

import boto3
import logfire
from botocore.exceptions import BotoCoreError, ClientError

from forum.adapter.error import StorageError
from forum.config import StorageSettings


@dataclass(frozen=True)
class StoredObject:
    """Location of an uploaded object."""

    key: str
    url: str


def build_object_key(prefix: str, filename: str | None) -> str:
    """Unique object key under ``prefix`` keeping the upload's extension.

    Args:
        prefix: Key prefix (folder)
        filename: Original filename, if known

    Returns:
        Object key, e.g. ``uploads/3f1c...e2.png``
    """
    extension = ""
    if filename and "." in filename:
        extension = "." + filename.rsplit(".", 1)[1].lower()
    return f"{prefix.strip('/')}/{uuid4().hex}{extension}"


class ObjectStorageClient(ABC):
    """Base class for object storage clients."""

    @abstractmethod
    async def upload(
        self, data: bytes, filename: str | None, content_type: str | None = None
    ) -> StoredObject:
        """Store bytes under a fresh key.

        Args:
            data: File content
            filename: Original filename (used for the extension)
            content_type: MIME type; guessed from filename when missing

        Returns:
            Key and public URL of the stored object

        Raises:
            StorageError: If the upload fails
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete an object.

        Raises:
            StorageError: If the delete request fails
        """
        pass


class Boto3ObjectStorageClient(ObjectStorageClient):
    """S3-compatible storage client backed by boto3.

    boto3 is synchronous, so calls run in a worker thread.
    """

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize storage client.

        Args:
            settings: Storage settings (endpoint, bucket, credentials)
        """
        self.settings = settings
        self._client = boto3.client(
            "s3",
            endpoint_url=settings.endpoint_url,
            region_name=settings.region,
            aws_access_key_id=settings.access_key,
            aws_secret_access_key=settings.secret_key,
        )

    async def upload(
        self, data: bytes, filename: str | None, content_type: str | None = None
    ) -> StoredObject:
        key = build_object_key(self.settings.key_prefix, filename)
        content_type = (
            content_type
            or (mimetypes.guess_type(filename)[0] if filename else None)
            or "application/octet-stream"
        )

        with logfire.span("storage.upload", key=key, size=len(data)):
            try:
                await asyncio.to_thread(
                    self._client.put_object,
                    Bucket=self.settings.bucket,
                    Key=key,
                    Body=data,
                    ContentType=content_type,
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("Object upload failed", key=key, error=str(e))
                raise StorageError(f"Failed to upload {key}: {e}") from e

        return StoredObject(key=key, url=f"{self.settings.public_url}/{key}")

    async def delete(self, key: str) -> None:
        with logfire.span("storage.delete", key=key):
            try:
                await asyncio.to_thread(
                    self._client.delete_object, Bucket=self.settings.bucket, Key=key
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("Object delete failed", key=key, error=str(e))
                raise StorageError(f"Failed to delete {key}: {e}") from e


class MockObjectStorageClient(ObjectStorageClient):
    """In-memory storage client for development and testing."""

    def __init__(self, base_url: str = "https://storage.example.com/forum") -> None:
        self.base_url = base_url
        self.objects: dict[str, bytes] = {}

    async def upload(
        self, data: bytes, filename: str | None, content_type: str | None = None
    ) -> StoredObject:
        _ = content_type  # Unused in mock
        if not data:
            raise StorageError("Refusing to store an empty object")

        key = build_object_key("uploads", filename)
        self.objects[key] = data
        return StoredObject(key=key, url=f"{self.base_url}/{key}")

    async def delete(self, key: str) -> None:
        self.objects.pop(key, None)
