from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db


# ---------------------------------------------------------------------------
# Repository factory functions (one per repository, each gets the shared db)
# ---------------------------------------------------------------------------


async def get_prospect_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.prospect_repository import ProspectRepository

    return ProspectRepository(db)


async def get_photo_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.photo_repository import PhotoRepository

    return PhotoRepository(db)


async def get_activity_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.activity_repository import ActivityRepository

    return ActivityRepository(db)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_photo_storage():
    """Build a :class:`PhotoStorage` rooted at ``settings.UPLOAD_DIR``."""
    from app.services.photo_storage import PhotoStorage

    return PhotoStorage()


async def get_prospect_service(
    storage=Depends(get_photo_storage),
):
    """Build a :class:`ProspectService` with injected dependencies."""
    from app.services.prospect_service import ProspectService

    return ProspectService(storage=storage)


async def get_photo_service(
    storage=Depends(get_photo_storage),
):
    """Build a :class:`PhotoService` with injected dependencies."""
    from app.services.photo_service import PhotoService

    return PhotoService(storage=storage)


async def get_activity_service():
    from app.services.activity_service import ActivityService

    return ActivityService()
