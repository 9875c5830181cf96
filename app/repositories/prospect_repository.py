from typing import Any, Dict, List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.orm.attributes import flag_modified

from app.models.prospect import Prospect
from app.repositories.base import BaseRepository
from app.schemas.prospect import ProspectFilter


class ProspectRepository(BaseRepository):
    """Encapsulates every SQL query that touches the ``prospects`` table.

    Lookups by id report a missing row as ``None`` (or ``False`` for
    :meth:`delete`) rather than raising; turning that into an error is
    the caller's decision.
    """

    async def create(self, **kwargs: Any) -> Prospect:
        """Insert a new prospect and return it with id and timestamps set."""
        prospect = Prospect(**kwargs)
        self._db.add(prospect)
        await self._db.flush()
        return prospect

    async def get_by_id(self, prospect_id: int) -> Optional[Prospect]:
        """Return a single prospect by primary key, or ``None``."""
        result = await self._db.execute(
            select(Prospect).where(Prospect.id == prospect_id)
        )
        return result.scalar_one_or_none()

    async def find(self, filters: Optional[ProspectFilter] = None) -> List[Prospect]:
        """Return prospects matching every supplied predicate.

        ``status``, ``priority`` and ``company`` are exact matches.
        ``search`` is a case-insensitive substring match against first
        name, last name, email and company, any of which qualifies.
        Results are newest first with id as the tiebreaker.
        """
        query = select(Prospect)
        if filters is not None:
            if filters.status is not None:
                query = query.where(Prospect.status == filters.status)
            if filters.priority is not None:
                query = query.where(Prospect.priority == filters.priority)
            if filters.company is not None:
                query = query.where(Prospect.company == filters.company)
            if filters.search:
                term = filters.search
                query = query.where(
                    or_(
                        Prospect.first_name.icontains(term, autoescape=True),
                        Prospect.last_name.icontains(term, autoescape=True),
                        Prospect.email.icontains(term, autoescape=True),
                        Prospect.company.icontains(term, autoescape=True),
                    )
                )

        query = query.order_by(Prospect.created_at.desc(), Prospect.id.desc())
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def update(
        self, prospect_id: int, changes: Dict[str, Any]
    ) -> Optional[Prospect]:
        """Merge *changes* into the stored row.

        Only keys present in *changes* are written; a ``None`` value
        clears the column.  ``updated_at`` is refreshed even when
        *changes* is empty or every value equals the stored one.
        """
        prospect = await self.get_by_id(prospect_id)
        if prospect is None:
            return None

        for field, value in changes.items():
            setattr(prospect, field, value)

        # Forces an UPDATE so the before_update listener bumps updated_at
        flag_modified(prospect, "updated_at")
        await self._db.flush()
        return prospect

    async def delete(self, prospect_id: int) -> bool:
        """Delete a prospect by id; ``False`` when no such row exists."""
        result = await self._db.execute(
            delete(Prospect)
            .where(Prospect.id == prospect_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0
