from typing import List

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.schemas.activity import ActivityCreate, ActivityOut
from app.services.activity_service import ActivityService
from app.repositories.prospect_repository import ProspectRepository
from app.repositories.activity_repository import ActivityRepository
from app.api.deps import get_activity_service, get_prospect_repo, get_activity_repo

router = APIRouter(prefix="/prospects/{prospect_id}/activities", tags=["Activities"])


@router.get("", response_model=List[ActivityOut])
async def list_prospect_activities(
    prospect_id: int,
    service: ActivityService = Depends(get_activity_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    activity_repo: ActivityRepository = Depends(get_activity_repo),
) -> List[ActivityOut]:
    """Activities for a prospect, most recent ``activity_date`` first."""
    activities = await service.list_activities(
        prospect_id, prospect_repo, activity_repo
    )
    return [ActivityOut.model_validate(a) for a in activities]


@router.post("", response_model=ActivityOut, status_code=201)
@limiter.limit(settings.RATE_LIMIT_CREATE)
async def create_activity(
    request: Request,
    prospect_id: int,
    request_body: ActivityCreate,
    service: ActivityService = Depends(get_activity_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    activity_repo: ActivityRepository = Depends(get_activity_repo),
) -> ActivityOut:
    """Log a call, email, meeting, note or status change."""
    activity = await service.create_activity(
        prospect_id, request_body, prospect_repo, activity_repo
    )
    return ActivityOut.model_validate(activity)
