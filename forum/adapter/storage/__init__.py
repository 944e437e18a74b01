"""Object storage adapter."""

from .client import (
    Boto3ObjectStorageClient,
    MockObjectStorageClient,
    ObjectStorageClient,
    StoredObject,
)

__all__ = [
    "ObjectStorageClient",
    "Boto3ObjectStorageClient",
    "MockObjectStorageClient",
    "StoredObject",
]
