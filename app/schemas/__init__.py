"""Pydantic schemas package – re-exports for convenience."""

# Common enums
from app.schemas.common import (
    ProspectStatus as ProspectStatus,
    ProspectPriority as ProspectPriority,
    ActivityType as ActivityType,
    SuccessResponse as SuccessResponse,
    HealthResponse as HealthResponse,
)

# Prospect schemas
from app.schemas.prospect import (
    ProspectCreate as ProspectCreate,
    ProspectUpdate as ProspectUpdate,
    ProspectFilter as ProspectFilter,
    ProspectOut as ProspectOut,
    ProspectWithDetails as ProspectWithDetails,
    DeleteProspectResponse as DeleteProspectResponse,
)

# Photo schemas
from app.schemas.photo import (
    PhotoUpload as PhotoUpload,
    PhotoOut as PhotoOut,
)

# Activity schemas
from app.schemas.activity import (
    ActivityCreate as ActivityCreate,
    ActivityOut as ActivityOut,
)
