"""Mock object storage provider for testing."""

from dishka import Scope, provide

from forum.adapter.storage import MockObjectStorageClient, ObjectStorageClient
from forum.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploads in memory instead of an S3 bucket."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_storage_client(self) -> ObjectStorageClient:
        return MockObjectStorageClient()
