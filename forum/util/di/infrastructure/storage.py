"""Object storage infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.storage import Boto3ObjectStorageClient, ObjectStorageClient
from forum.config import StorageSettings
from forum.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider backed by an S3-compatible bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_storage_client(self, settings: StorageSettings) -> ObjectStorageClient:
        """Provide object storage client.

        The boto3 client is thread-safe, so one instance serves the app.
        """
        return Boto3ObjectStorageClient(settings)
