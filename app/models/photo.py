from sqlalchemy import Column, Integer, String, CheckConstraint, ForeignKey, Index
from sqlalchemy.sql import func

from app.models.base import Base, UTCDateTime


class ProspectPhoto(Base):
    __tablename__ = "prospect_photos"
    id = Column(Integer, primary_key=True, autoincrement=True)
    prospect_id = Column(Integer, ForeignKey("prospects.id"), nullable=False)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False)
    file_size = Column(Integer, nullable=False)
    file_path = Column(String(500), nullable=False)
    uploaded_at = Column(UTCDateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint("file_size > 0", name="ck_photo_file_size_positive"),
        Index("idx_photos_prospect_uploaded", "prospect_id", "uploaded_at"),
        {"sqlite_autoincrement": True},
    )
