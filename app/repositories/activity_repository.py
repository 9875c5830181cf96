from typing import Any, List

from sqlalchemy import delete, select

from app.models.activity import ProspectActivity
from app.repositories.base import BaseRepository


class ActivityRepository(BaseRepository):
    """Encapsulates queries against the ``prospect_activities`` table."""

    async def create(self, **kwargs: Any) -> ProspectActivity:
        """Insert a new activity record."""
        activity = ProspectActivity(**kwargs)
        self._db.add(activity)
        await self._db.flush()
        return activity

    async def list_for_prospect(self, prospect_id: int) -> List[ProspectActivity]:
        """Return a prospect's activities, most recent ``activity_date`` first."""
        result = await self._db.execute(
            select(ProspectActivity)
            .where(ProspectActivity.prospect_id == prospect_id)
            .order_by(
                ProspectActivity.activity_date.desc(), ProspectActivity.id.desc()
            )
        )
        return list(result.scalars().all())

    async def delete_for_prospect(self, prospect_id: int) -> int:
        result = await self._db.execute(
            delete(ProspectActivity)
            .where(ProspectActivity.prospect_id == prospect_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount
