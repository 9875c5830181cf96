"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    # Repository factories
    get_prospect_repo,
    get_photo_repo,
    get_activity_repo,
    # Service factories
    get_photo_storage,
    get_prospect_service,
    get_photo_service,
    get_activity_service,
)

__all__ = [
    "get_prospect_repo",
    "get_photo_repo",
    "get_activity_repo",
    "get_photo_storage",
    "get_prospect_service",
    "get_photo_service",
    "get_activity_service",
]
