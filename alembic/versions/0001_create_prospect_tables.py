"""create prospects, prospect_photos and prospect_activities

Revision ID: 0001_create_prospect_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

from app.core.constants import (
    ACTIVITY_TYPE_CHECK_CLAUSE,
    PRIORITY_CHECK_CLAUSE,
    STATUS_CHECK_CLAUSE,
)

# revision identifiers, used by Alembic.
revision: str = "0001_create_prospect_tables"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prospects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50)),
        sa.Column("company", sa.String(255)),
        sa.Column("position", sa.String(255)),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("estimated_value", sa.Numeric(15, 2)),
        sa.Column("notes", sa.Text()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(STATUS_CHECK_CLAUSE, name="ck_prospect_status"),
        sa.CheckConstraint(PRIORITY_CHECK_CLAUSE, name="ck_prospect_priority"),
        sa.CheckConstraint(
            "estimated_value IS NULL OR estimated_value > 0",
            name="ck_prospect_estimated_value_positive",
        ),
        sa.CheckConstraint("created_at <= updated_at", name="ck_prospect_timestamps"),
    )
    op.create_index("idx_prospects_created_id", "prospects", ["created_at", "id"])
    op.create_index("idx_prospects_status", "prospects", ["status"])
    op.create_index("idx_prospects_priority", "prospects", ["priority"])
    op.create_index("idx_prospects_company", "prospects", ["company"])

    op.create_table(
        "prospect_photos",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "prospect_id",
            sa.Integer(),
            sa.ForeignKey("prospects.id"),
            nullable=False,
        ),
        sa.Column("filename", sa.String(255), nullable=False),
        sa.Column("original_name", sa.String(255), nullable=False),
        sa.Column("mime_type", sa.String(100), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("file_path", sa.String(500), nullable=False),
        sa.Column(
            "uploaded_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint("file_size > 0", name="ck_photo_file_size_positive"),
    )
    op.create_index(
        "idx_photos_prospect_uploaded",
        "prospect_photos",
        ["prospect_id", "uploaded_at"],
    )

    op.create_table(
        "prospect_activities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "prospect_id",
            sa.Integer(),
            sa.ForeignKey("prospects.id"),
            nullable=False,
        ),
        sa.Column("activity_type", sa.String(20), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column(
            "activity_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(ACTIVITY_TYPE_CHECK_CLAUSE, name="ck_activity_type"),
    )
    op.create_index(
        "idx_activities_prospect_date",
        "prospect_activities",
        ["prospect_id", "activity_date"],
    )


def downgrade() -> None:
    op.drop_index("idx_activities_prospect_date", table_name="prospect_activities")
    op.drop_table("prospect_activities")
    op.drop_index("idx_photos_prospect_uploaded", table_name="prospect_photos")
    op.drop_table("prospect_photos")
    op.drop_index("idx_prospects_company", table_name="prospects")
    op.drop_index("idx_prospects_priority", table_name="prospects")
    op.drop_index("idx_prospects_status", table_name="prospects")
    op.drop_index("idx_prospects_created_id", table_name="prospects")
    op.drop_table("prospects")
