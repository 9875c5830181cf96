from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.rate_limit import limiter
from app.schemas.common import ProspectPriority, ProspectStatus
from app.schemas.prospect import (
    DeleteProspectResponse,
    ProspectCreate,
    ProspectFilter,
    ProspectOut,
    ProspectUpdate,
    ProspectWithDetails,
)
from app.services.prospect_service import ProspectService
from app.repositories.prospect_repository import ProspectRepository
from app.repositories.photo_repository import PhotoRepository
from app.repositories.activity_repository import ActivityRepository
from app.api.deps import (
    get_prospect_service,
    get_prospect_repo,
    get_photo_repo,
    get_activity_repo,
)

router = APIRouter(prefix="/prospects", tags=["Prospects"])


@router.post("", response_model=ProspectOut, status_code=201)
@limiter.limit(settings.RATE_LIMIT_CREATE)
async def create_prospect(
    request: Request,
    request_body: ProspectCreate,
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
) -> ProspectOut:
    """Create a prospect; ``status`` and ``priority`` default to new/medium."""
    prospect = await service.create_prospect(request_body, prospect_repo)
    return ProspectOut.model_validate(prospect)


@router.get("", response_model=List[ProspectOut])
async def list_prospects(
    status: Optional[ProspectStatus] = Query(None),
    priority: Optional[ProspectPriority] = Query(None),
    company: Optional[str] = Query(None, description="Exact company match"),
    search: Optional[str] = Query(
        None,
        description="Case-insensitive match on first/last name, email or company",
    ),
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
) -> List[ProspectOut]:
    """List prospects, newest first, narrowed by any supplied filters."""
    filters = ProspectFilter(
        status=status, priority=priority, company=company, search=search
    )
    prospects = await service.list_prospects(filters, prospect_repo)
    return [ProspectOut.model_validate(p) for p in prospects]


@router.get("/{prospect_id}", response_model=ProspectOut)
async def get_prospect(
    prospect_id: int,
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
) -> ProspectOut:
    prospect = await service.get_prospect(prospect_id, prospect_repo)
    return ProspectOut.model_validate(prospect)


@router.get("/{prospect_id}/details", response_model=ProspectWithDetails)
async def get_prospect_details(
    prospect_id: int,
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
    activity_repo: ActivityRepository = Depends(get_activity_repo),
) -> ProspectWithDetails:
    """Return a prospect with its photos and activities."""
    return await service.get_prospect_details(
        prospect_id, prospect_repo, photo_repo, activity_repo
    )


@router.patch("/{prospect_id}", response_model=ProspectOut)
async def update_prospect(
    prospect_id: int,
    update_data: ProspectUpdate,
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
) -> ProspectOut:
    """Partially update a prospect.

    Fields left out of the body are untouched; fields sent as ``null``
    are cleared.
    """
    prospect = await service.update_prospect(prospect_id, update_data, prospect_repo)
    return ProspectOut.model_validate(prospect)


@router.delete(
    "/{prospect_id}",
    response_model=DeleteProspectResponse,
    responses={404: {"model": DeleteProspectResponse}},
)
async def delete_prospect(
    prospect_id: int,
    service: ProspectService = Depends(get_prospect_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
    activity_repo: ActivityRepository = Depends(get_activity_repo),
):
    """Delete a prospect along with its photos and activities."""
    result = await service.delete_prospect(
        prospect_id, prospect_repo, photo_repo, activity_repo
    )
    if not result.success:
        return JSONResponse(status_code=404, content=result.model_dump())
    return result
