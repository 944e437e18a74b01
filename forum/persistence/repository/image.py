"""PostgreSQL implementation of Image repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Image
from forum.domain.repository import ImageRepository
from forum.domain.value import PostId
from forum.persistence.mappers import image_to_dict, row_to_image
from forum.persistence.tables import images_table, post_images_table


class PostgresImageRepository(ImageRepository):
    """PostgreSQL implementation of ImageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post(self, post_id: PostId) -> Optional[Image]:
        stmt = (
            select(images_table)
            .select_from(
                images_table.join(
                    post_images_table,
                    images_table.c.id == post_images_table.c.image_id,
                )
            )
            .where(post_images_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_image(row._asdict()) if row else None

    async def save_for_post(self, image: Image, post_id: PostId) -> Image:
        await self.session.execute(insert(images_table).values(**image_to_dict(image)))
        await self.session.execute(
            insert(post_images_table).values(
                post_id=post_id, image_id=image.id, created_at=datetime.now()
            )
        )
        await self.session.flush()
        return image

    async def delete_for_post(self, post_id: PostId) -> Optional[Image]:
        """Detach and delete a post's image, returning it if there was one."""
        image = await self.find_by_post(post_id)
        if image is None:
            return None

        await self.session.execute(
            delete(post_images_table).where(post_images_table.c.post_id == post_id)
        )
        await self.session.execute(
            delete(images_table).where(images_table.c.id == image.id)
        )
        await self.session.flush()
        return image
