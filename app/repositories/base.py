from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Holds the request's ``AsyncSession``.

    The prospect, photo and activity repositories built for one request
    share a single session, so a commit through any of them commits the
    whole unit of work (e.g. a prospect delete together with its
    children).
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._db.commit()

    async def rollback(self) -> None:
        """Discard everything flushed since the last commit."""
        await self._db.rollback()
