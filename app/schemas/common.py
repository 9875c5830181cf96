from enum import Enum
from pydantic import BaseModel


class ProspectStatus(str, Enum):
    new = "new"
    contacted = "contacted"
    qualified = "qualified"
    proposal = "proposal"
    negotiation = "negotiation"
    closed_won = "closed_won"
    closed_lost = "closed_lost"


class ProspectPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class ActivityType(str, Enum):
    call = "call"
    email = "email"
    meeting = "meeting"
    note = "note"
    status_change = "status_change"


class SuccessResponse(BaseModel):
    """Generic success response base."""

    success: bool = True


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str
