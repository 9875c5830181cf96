from typing import Any, List, Optional

from sqlalchemy import delete, select

from app.models.photo import ProspectPhoto
from app.repositories.base import BaseRepository


class PhotoRepository(BaseRepository):
    """Encapsulates queries against the ``prospect_photos`` table."""

    async def create(self, **kwargs: Any) -> ProspectPhoto:
        """Insert a photo metadata row."""
        photo = ProspectPhoto(**kwargs)
        self._db.add(photo)
        await self._db.flush()
        return photo

    async def get_by_id(self, photo_id: int) -> Optional[ProspectPhoto]:
        result = await self._db.execute(
            select(ProspectPhoto).where(ProspectPhoto.id == photo_id)
        )
        return result.scalar_one_or_none()

    async def list_for_prospect(self, prospect_id: int) -> List[ProspectPhoto]:
        """Return a prospect's photos, most recently uploaded first."""
        result = await self._db.execute(
            select(ProspectPhoto)
            .where(ProspectPhoto.prospect_id == prospect_id)
            .order_by(ProspectPhoto.uploaded_at.desc(), ProspectPhoto.id.desc())
        )
        return list(result.scalars().all())

    async def delete(self, photo_id: int) -> bool:
        result = await self._db.execute(
            delete(ProspectPhoto)
            .where(ProspectPhoto.id == photo_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0

    async def delete_for_prospect(self, prospect_id: int) -> int:
        """Delete every photo row of a prospect; returns the row count."""
        result = await self._db.execute(
            delete(ProspectPhoto)
            .where(ProspectPhoto.prospect_id == prospect_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount
