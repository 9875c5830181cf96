import logging
from datetime import timezone
from typing import List, Optional

from app.core.exceptions import InvalidProspectDataError, ProspectNotFoundError
from app.models.prospect import Prospect
from app.repositories.activity_repository import ActivityRepository
from app.repositories.photo_repository import PhotoRepository
from app.repositories.prospect_repository import ProspectRepository
from app.schemas.activity import ActivityOut
from app.schemas.photo import PhotoOut
from app.schemas.prospect import (
    DeleteProspectResponse,
    ProspectCreate,
    ProspectFilter,
    ProspectOut,
    ProspectUpdate,
    ProspectWithDetails,
)
from app.services.photo_storage import PhotoStorage

logger = logging.getLogger(__name__)


class ProspectService:
    """Orchestrates prospect CRUD.

    Repositories report a missing row as ``None``/``False``; this layer
    turns that into :class:`ProspectNotFoundError` for the single-record
    reads and writes, and owns the commit for each workflow.
    """

    def __init__(self, storage: Optional[PhotoStorage] = None) -> None:
        self._storage = storage or PhotoStorage()

    async def create_prospect(
        self, data: ProspectCreate, prospect_repo: ProspectRepository
    ) -> Prospect:
        prospect = await prospect_repo.create(**data.model_dump())
        await prospect_repo.commit()
        logger.info("Created prospect %d (%s)", prospect.id, prospect.email)
        return prospect

    async def list_prospects(
        self, filters: ProspectFilter, prospect_repo: ProspectRepository
    ) -> List[Prospect]:
        return await prospect_repo.find(filters)

    async def get_prospect(
        self, prospect_id: int, prospect_repo: ProspectRepository
    ) -> Prospect:
        prospect = await prospect_repo.get_by_id(prospect_id)
        if prospect is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")
        return prospect

    async def get_prospect_details(
        self,
        prospect_id: int,
        prospect_repo: ProspectRepository,
        photo_repo: PhotoRepository,
        activity_repo: ActivityRepository,
    ) -> ProspectWithDetails:
        prospect = await self.get_prospect(prospect_id, prospect_repo)
        photos = await photo_repo.list_for_prospect(prospect_id)
        activities = await activity_repo.list_for_prospect(prospect_id)
        return ProspectWithDetails(
            **ProspectOut.model_validate(prospect).model_dump(),
            photos=[PhotoOut.model_validate(p) for p in photos],
            activities=[ActivityOut.model_validate(a) for a in activities],
        )

    async def update_prospect(
        self,
        prospect_id: int,
        update_data: ProspectUpdate,
        prospect_repo: ProspectRepository,
    ) -> Prospect:
        """Apply a partial update.

        Raises:
            ProspectNotFoundError: If no prospect has *prospect_id*.
            InvalidProspectDataError: If the body tries to change ``id``
                or ``created_at``.
        """
        prospect = await prospect_repo.get_by_id(prospect_id)
        if prospect is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")

        self._check_immutable_fields(prospect, update_data)

        changes = update_data.changes()
        prospect = await prospect_repo.update(prospect_id, changes)
        if prospect is None:
            # removed by a concurrent request after the lookup above
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")
        await prospect_repo.commit()
        logger.info(
            "Updated prospect %d (fields: %s)",
            prospect_id,
            ", ".join(sorted(changes)) or "none",
        )
        return prospect

    async def delete_prospect(
        self,
        prospect_id: int,
        prospect_repo: ProspectRepository,
        photo_repo: PhotoRepository,
        activity_repo: ActivityRepository,
    ) -> DeleteProspectResponse:
        """Delete a prospect together with its activities and photos.

        A missing prospect is reported as ``success=False`` rather than
        raised, so callers can tell "nothing to delete" apart from a
        storage failure (which propagates).
        """
        if await prospect_repo.get_by_id(prospect_id) is None:
            logger.warning("Delete requested for missing prospect %d", prospect_id)
            return DeleteProspectResponse(
                success=False,
                message=f"Prospect with ID {prospect_id} not found",
            )

        photos = await photo_repo.list_for_prospect(prospect_id)
        await activity_repo.delete_for_prospect(prospect_id)
        await photo_repo.delete_for_prospect(prospect_id)
        deleted = await prospect_repo.delete(prospect_id)
        await prospect_repo.commit()

        # Rows are gone; stray files are harmless
        for photo in photos:
            await self._storage.remove(photo.filename)

        if not deleted:
            # Removed by a concurrent request between the lookup and the delete
            return DeleteProspectResponse(
                success=False,
                message=f"Prospect with ID {prospect_id} not found",
            )

        logger.info("Deleted prospect %d", prospect_id)
        return DeleteProspectResponse(
            success=True,
            id=prospect_id,
            message=f"Prospect with ID {prospect_id} has been deleted successfully",
        )

    @staticmethod
    def _check_immutable_fields(
        prospect: Prospect, update_data: ProspectUpdate
    ) -> None:
        sent = update_data.model_fields_set
        if "id" in sent and update_data.id != prospect.id:
            raise InvalidProspectDataError(
                f"id is immutable (stored {prospect.id}, got {update_data.id})"
            )
        if "created_at" in sent:
            supplied = update_data.created_at
            if supplied is not None and supplied.tzinfo is None:
                supplied = supplied.replace(tzinfo=timezone.utc)
            if supplied != prospect.created_at:
                raise InvalidProspectDataError("created_at is immutable")
