# Ensures the project root is on sys.path so imports like `from services...` work,
# and points the app at an in-memory SQLite database before anything imports shared.db.
import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from main import app  # noqa: E402
from services.school_management.models.schools import School  # noqa: E402
from services.school_management.schemas.schools import SchoolOut  # noqa: E402
from shared.db import Base, SessionLocal, engine  # noqa: E402


async def _reset_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def _count_schools():
    async with SessionLocal() as session:
        result = await session.execute(select(func.count()).select_from(School))
        return result.scalar_one()


async def _fetch_school(school_id):
    async with SessionLocal() as session:
        return SchoolOut.model_validate(await session.get(School, school_id)).model_dump()


@pytest.fixture(scope="session")
def _app_client():
    # One client for the whole run keeps the app on a single event loop.
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(_app_client):
    _app_client.portal.call(_reset_tables)
    yield _app_client
    app.dependency_overrides.clear()


@pytest.fixture
def school_count(client):
    return lambda: client.portal.call(_count_schools)


@pytest.fixture
def fetch_school(client):
    return lambda school_id: client.portal.call(_fetch_school, school_id)
