from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import ActivityType


class ActivityCreate(BaseModel):
    """Payload for logging an interaction with a prospect."""

    model_config = ConfigDict(use_enum_values=True)

    activity_type: ActivityType
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    activity_date: Optional[datetime] = None

    @field_validator("activity_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps are taken to be UTC."""
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    prospect_id: int
    activity_type: ActivityType
    title: str
    description: Optional[str] = None
    activity_date: datetime
    created_at: datetime
