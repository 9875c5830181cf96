from sqlalchemy import Column, Integer, String, Text, CheckConstraint, ForeignKey, Index
from sqlalchemy.sql import func

from app.core.constants import ACTIVITY_TYPE_CHECK_CLAUSE
from app.models.base import Base, UTCDateTime


class ProspectActivity(Base):
    __tablename__ = "prospect_activities"
    id = Column(Integer, primary_key=True, autoincrement=True)
    prospect_id = Column(Integer, ForeignKey("prospects.id"), nullable=False)
    activity_type = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    activity_date = Column(UTCDateTime, nullable=False, server_default=func.now())
    created_at = Column(UTCDateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(ACTIVITY_TYPE_CHECK_CLAUSE, name="ck_activity_type"),
        Index("idx_activities_prospect_date", "prospect_id", "activity_date"),
        {"sqlite_autoincrement": True},
    )
