"""Sample data seeder for local development.

Usage:
    python -m app.scripts.seed
"""

import asyncio
from datetime import timedelta

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import text

from app.core.config import settings
from app.models import Base, Prospect, ProspectActivity
from app.models.base import utc_now
from app.schemas.common import ActivityType, ProspectPriority, ProspectStatus

# Derived from the enums in common.py
STATUS_VALUES = [s.value for s in ProspectStatus]
PRIORITY_VALUES = [p.value for p in ProspectPriority]
ACTIVITY_TYPES = [a.value for a in ActivityType]

FIRST_NAMES = ["John", "Siti", "Budi", "Maria", "Ahmad", "Grace"]
LAST_NAMES = ["Doe", "Rahayu", "Santoso", "Garcia", "Hidayat", "Lee"]
COMPANIES = ["Tech Corp", "Nusantara Logistik", "Acme Retail", None]
POSITIONS = ["CTO", "Procurement Lead", "Owner", None]


async def seed(count: int = 30):
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_maker() as session:
        print("Seeding sample prospects")

        # Children first; there is no ON DELETE CASCADE
        for table in ("prospect_activities", "prospect_photos", "prospects"):
            await session.execute(text(f"DELETE FROM {table}"))
        await session.commit()
        print("Cleared existing data")

        prospects = []
        for i in range(count):
            prospect = Prospect(
                first_name=FIRST_NAMES[i % len(FIRST_NAMES)],
                last_name=LAST_NAMES[(i // 2) % len(LAST_NAMES)],
                email=f"prospect{i}@example.com",
                phone=f"+62812{i:07d}" if i % 3 else None,
                company=COMPANIES[i % len(COMPANIES)],
                position=POSITIONS[i % len(POSITIONS)],
                status=STATUS_VALUES[i % len(STATUS_VALUES)],
                priority=PRIORITY_VALUES[i % len(PRIORITY_VALUES)],
                estimated_value=float(5_000 * (i + 1)) if i % 4 else None,
                notes="Met at trade show" if i % 5 == 0 else None,
            )
            session.add(prospect)
            prospects.append(prospect)
        await session.flush()
        print(f"Created {len(prospects)} prospects")

        now = utc_now()
        activity_count = 0
        for i, prospect in enumerate(prospects):
            for j in range(i % 3):
                session.add(
                    ProspectActivity(
                        prospect_id=prospect.id,
                        activity_type=ACTIVITY_TYPES[(i + j) % len(ACTIVITY_TYPES)],
                        title=f"Follow-up #{j + 1}",
                        description=None,
                        activity_date=now - timedelta(days=j + 1),
                    )
                )
                activity_count += 1
        await session.commit()
        print(f"Created {activity_count} activities")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
