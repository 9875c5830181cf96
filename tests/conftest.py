import os
from typing import AsyncGenerator

# Settings are read at import time, so configure before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy import event  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.database import get_db  # noqa: E402
from app.dependencies import get_photo_storage  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Base  # noqa: E402
from app.repositories.activity_repository import ActivityRepository  # noqa: E402
from app.repositories.photo_repository import PhotoRepository  # noqa: E402
from app.repositories.prospect_repository import ProspectRepository  # noqa: E402
from app.services.photo_storage import PhotoStorage  # noqa: E402


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh in-memory SQLite database per test, shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite leaves foreign keys unenforced unless asked per connection
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def prospect_repo(db_session) -> ProspectRepository:
    return ProspectRepository(db_session)


@pytest.fixture
def photo_repo(db_session) -> PhotoRepository:
    return PhotoRepository(db_session)


@pytest.fixture
def activity_repo(db_session) -> ActivityRepository:
    return ActivityRepository(db_session)


@pytest.fixture
def photo_storage(tmp_path) -> PhotoStorage:
    return PhotoStorage(upload_dir=str(tmp_path / "uploads"))


@pytest_asyncio.fixture
async def async_client(
    session_factory, photo_storage
) -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_photo_storage] = lambda: photo_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
