import logging
from typing import List

from app.core.exceptions import ProspectNotFoundError
from app.models.activity import ProspectActivity
from app.repositories.activity_repository import ActivityRepository
from app.repositories.prospect_repository import ProspectRepository
from app.schemas.activity import ActivityCreate

logger = logging.getLogger(__name__)


class ActivityService:
    """Append-only activity log for a prospect."""

    async def create_activity(
        self,
        prospect_id: int,
        data: ActivityCreate,
        prospect_repo: ProspectRepository,
        activity_repo: ActivityRepository,
    ) -> ProspectActivity:
        if await prospect_repo.get_by_id(prospect_id) is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")

        # activity_date stays None when omitted; the insert listener fills it
        activity = await activity_repo.create(
            prospect_id=prospect_id, **data.model_dump()
        )
        await activity_repo.commit()
        logger.info(
            "Logged %s activity %d for prospect %d",
            activity.activity_type,
            activity.id,
            prospect_id,
        )
        return activity

    async def list_activities(
        self,
        prospect_id: int,
        prospect_repo: ProspectRepository,
        activity_repo: ActivityRepository,
    ) -> List[ProspectActivity]:
        if await prospect_repo.get_by_id(prospect_id) is None:
            raise ProspectNotFoundError(f"Prospect {prospect_id} not found")
        return await activity_repo.list_for_prospect(prospect_id)
