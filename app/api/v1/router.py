from fastapi import APIRouter

from app.api.v1.endpoints import prospects, photos, activities, health

router = APIRouter(prefix="/api/v1")

router.include_router(prospects.router)
router.include_router(photos.router)
router.include_router(activities.router)
router.include_router(health.router)
