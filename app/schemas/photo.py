from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PhotoUpload(BaseModel):
    """Base64 photo payload; a ``data:<mime>;base64,`` prefix is allowed."""

    original_name: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)
    photo_data: str = Field(..., min_length=1)


class PhotoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    prospect_id: int
    filename: str
    original_name: str
    mime_type: str
    file_size: int
    file_path: str
    uploaded_at: datetime
