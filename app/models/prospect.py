from sqlalchemy import (
    Column,
    Integer,
    String,
    Numeric,
    Text,
    CheckConstraint,
    Index,
)
from sqlalchemy.sql import func

from app.core.constants import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    PRIORITY_CHECK_CLAUSE,
    STATUS_CHECK_CLAUSE,
)
from app.models.base import Base, UTCDateTime


class Prospect(Base):
    """Sales lead / contact tracked through the CRM pipeline.

    ``status`` is a label only: any status may move to any other.
    Photos and activities reference this table by ``prospect_id`` but
    are not declared as ORM relationships, so deleting a prospect never
    touches them implicitly.
    """

    __tablename__ = "prospects"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    company = Column(String(255))
    position = Column(String(255))
    status = Column(String(20), nullable=False, server_default=DEFAULT_STATUS)
    priority = Column(String(20), nullable=False, server_default=DEFAULT_PRIORITY)
    estimated_value = Column(Numeric(15, 2, asdecimal=False))
    notes = Column(Text)
    created_at = Column(UTCDateTime, nullable=False, server_default=func.now())
    updated_at = Column(UTCDateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(STATUS_CHECK_CLAUSE, name="ck_prospect_status"),
        CheckConstraint(PRIORITY_CHECK_CLAUSE, name="ck_prospect_priority"),
        CheckConstraint(
            "estimated_value IS NULL OR estimated_value > 0",
            name="ck_prospect_estimated_value_positive",
        ),
        CheckConstraint("created_at <= updated_at", name="ck_prospect_timestamps"),
        Index("idx_prospects_created_id", "created_at", "id"),
        Index("idx_prospects_status", "status"),
        Index("idx_prospects_priority", "priority"),
        Index("idx_prospects_company", "company"),
        # ids must never be reused, including on SQLite
        {"sqlite_autoincrement": True},
    )
