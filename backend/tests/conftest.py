"""
Shared fixtures: every test gets a fresh in-memory SQLite database
"""
import os

os.environ["LOG_TO_FILE"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.mastery_states import SatSection
from core.schemas import StudentCreate, TopicCreate
from db.database import Base, get_db, get_db_context
from main import app
from services.catalog_service import catalog_service
from services.student_service import student_service


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Pure engine tests, no database")
    config.addinivalue_line("markers", "integration: Tests against the in-memory database")


def pytest_collection_modifyitems(config, items):
    """Mark tests by the folder they live in"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
async def engine():
    test_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with get_db_context(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def student(db):
    created = await student_service.create_student(db, StudentCreate(
        name="Test Student",
        email="student@example.com",
        target_score=1400,
        current_projected_score=1300,
        study_streak=3
    ))
    await db.commit()
    return created


@pytest.fixture
async def three_topics(db):
    """T1 (impact 25), T2 (impact 30), T3 (impact 10), all math, in that order"""
    topics = []
    for order, (name, impact) in enumerate([("T1", 25), ("T2", 30), ("T3", 10)], start=1):
        topics.append(await catalog_service.create_topic(db, TopicCreate(
            section=SatSection.MATH, name=name, order=order, score_impact=impact
        )))
    await db.commit()
    return topics
