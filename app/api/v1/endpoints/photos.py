from typing import List

from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.exceptions import PhotoNotFoundError
from app.core.rate_limit import limiter
from app.schemas.common import SuccessResponse
from app.schemas.photo import PhotoOut, PhotoUpload
from app.services.photo_service import PhotoService
from app.repositories.prospect_repository import ProspectRepository
from app.repositories.photo_repository import PhotoRepository
from app.api.deps import get_photo_service, get_prospect_repo, get_photo_repo

router = APIRouter(tags=["Photos"])


@router.get("/prospects/{prospect_id}/photos", response_model=List[PhotoOut])
async def list_prospect_photos(
    prospect_id: int,
    service: PhotoService = Depends(get_photo_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
) -> List[PhotoOut]:
    """Photos for a prospect, most recently uploaded first."""
    photos = await service.list_photos(prospect_id, prospect_repo, photo_repo)
    return [PhotoOut.model_validate(p) for p in photos]


@router.post(
    "/prospects/{prospect_id}/photos", response_model=PhotoOut, status_code=201
)
@limiter.limit(settings.RATE_LIMIT_CREATE)
async def upload_photo(
    request: Request,
    prospect_id: int,
    request_body: PhotoUpload,
    service: PhotoService = Depends(get_photo_service),
    prospect_repo: ProspectRepository = Depends(get_prospect_repo),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
) -> PhotoOut:
    """Upload a base64-encoded photo for a prospect."""
    photo = await service.upload_photo(
        prospect_id, request_body, prospect_repo, photo_repo
    )
    return PhotoOut.model_validate(photo)


@router.delete("/photos/{photo_id}", response_model=SuccessResponse)
async def delete_photo(
    photo_id: int,
    service: PhotoService = Depends(get_photo_service),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
) -> SuccessResponse:
    """Delete a photo record and its stored file."""
    if not await service.delete_photo(photo_id, photo_repo):
        raise PhotoNotFoundError(f"Photo {photo_id} not found")
    return SuccessResponse()
