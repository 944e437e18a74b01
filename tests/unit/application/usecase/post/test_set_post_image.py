"""Unit tests for SetPostImageUseCase."""

import pytest

from forum.adapter.error import StorageError
from forum.adapter.storage import MockObjectStorageClient, ObjectStorageClient
from forum.application.usecase.post import SetPostImageRequest, SetPostImageUseCase
from forum.domain.error import NotAuthorizedError
from forum.domain.repository import ImageRepository, UserRepository
from forum.domain.service import PostService
from forum.domain.value import PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingDeleteStorageClient(MockObjectStorageClient):
    """Storage client whose deletes always fail."""

    async def delete(self, key: str) -> None:
        raise StorageError(f"Failed to delete {key}")


async def _image_post(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    author = await user_repo.save(make_user("author"))
    post = await post_service.create_post(author.id, "", type=PostType.IMAGE)
    return author, post


class TestSetPostImageUseCase:
    """Tests for SetPostImageUseCase."""

    @pytest.mark.asyncio
    async def test_upload_attaches_image_to_post(self, unit_env):
        """The first upload stores the object and links it to the post."""
        # Arrange
        use_case = await unit_env.get(SetPostImageUseCase)
        storage = await unit_env.get(ObjectStorageClient)
        image_repo = await unit_env.get(ImageRepository)
        author, post = await _image_post(unit_env)

        # Act
        response = await use_case.execute(
            SetPostImageRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                data=b"\x89PNG...",
                filename="cat.png",
            )
        )

        # Assert
        assert response.replaced is False
        image = await image_repo.find_by_post(post.id)
        assert image.url == response.url
        assert image.storage_key.endswith(".png")
        assert storage.objects[image.storage_key] == b"\x89PNG..."

    @pytest.mark.asyncio
    async def test_second_upload_replaces_and_deletes_old_object(self, unit_env):
        """Replacing keeps one image per post and removes the old object."""
        # Arrange
        use_case = await unit_env.get(SetPostImageUseCase)
        storage = await unit_env.get(ObjectStorageClient)
        image_repo = await unit_env.get(ImageRepository)
        author, post = await _image_post(unit_env)
        await use_case.execute(
            SetPostImageRequest(
                post_id=str(post.id), user_id=str(author.id), data=b"old", filename="a.jpg"
            )
        )
        old_key = (await image_repo.find_by_post(post.id)).storage_key

        # Act
        response = await use_case.execute(
            SetPostImageRequest(
                post_id=str(post.id), user_id=str(author.id), data=b"new", filename="b.jpg"
            )
        )

        # Assert
        assert response.replaced is True
        assert old_key not in storage.objects
        new_image = await image_repo.find_by_post(post.id)
        assert storage.objects[new_image.storage_key] == b"new"

    @pytest.mark.asyncio
    async def test_failed_old_object_delete_keeps_new_image(self, unit_env):
        """A storage error while cleaning up does not undo the replacement."""
        # Arrange
        post_service = await unit_env.get(PostService)
        image_repo = await unit_env.get(ImageRepository)
        storage = FailingDeleteStorageClient()
        use_case = SetPostImageUseCase(post_service=post_service, storage_client=storage)
        author, post = await _image_post(unit_env)
        await use_case.execute(
            SetPostImageRequest(
                post_id=str(post.id), user_id=str(author.id), data=b"old"
            )
        )

        # Act
        response = await use_case.execute(
            SetPostImageRequest(
                post_id=str(post.id), user_id=str(author.id), data=b"new"
            )
        )

        # Assert
        assert response.replaced is True
        assert (await image_repo.find_by_post(post.id)).url == response.url

    @pytest.mark.asyncio
    async def test_non_author_cannot_upload(self, unit_env):
        """Only the author may set the image; nothing is uploaded."""
        # Arrange
        use_case = await unit_env.get(SetPostImageUseCase)
        storage = await unit_env.get(ObjectStorageClient)
        user_repo = await unit_env.get(UserRepository)
        _, post = await _image_post(unit_env)
        intruder = await user_repo.save(make_user("intruder"))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                SetPostImageRequest(
                    post_id=str(post.id), user_id=str(intruder.id), data=b"x"
                )
            )

        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_upload_failure_raises_storage_error(self, unit_env):
        """Upload errors surface as StorageError and leave the post without image."""
        # Arrange
        use_case = await unit_env.get(SetPostImageUseCase)
        image_repo = await unit_env.get(ImageRepository)
        author, post = await _image_post(unit_env)

        # Act & Assert
        with pytest.raises(StorageError):
            await use_case.execute(
                SetPostImageRequest(
                    post_id=str(post.id), user_id=str(author.id), data=b""
                )
            )

        assert await image_repo.find_by_post(post.id) is None
