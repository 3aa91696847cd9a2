"""Shared fixtures for tests: async SQLite engine, test client, seed data."""

from datetime import date

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base, get_db

# Ensure all models are imported so metadata is populated
import app.models  # noqa: F401

from app.models.candidate import Candidate
from app.models.candidate_skill import CandidateSkill
from app.models.skill import Skill
from app.services.reference_data import SKILLS

# Use in-memory SQLite for tests (no PostgreSQL required)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(TEST_DATABASE_URL, echo=False)

TestSessionFactory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@event.listens_for(engine.sync_engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Provide a clean DB session for each test."""
    async with TestSessionFactory() as session:
        yield session


async def _override_get_db():
    async with TestSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@pytest_asyncio.fixture
async def async_client():
    """Async HTTPX client with DB override."""
    from app.main import app

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def skills(db_session: AsyncSession) -> list[Skill]:
    """Reference skills 1..8 (C#, JavaScript, SQL, English, ...)."""
    rows = [Skill(id=skill_id, name=name) for skill_id, name in SKILLS]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


async def _add_candidate(
    db: AsyncSession,
    name: str,
    birthday: date,
    phone_number: str,
    email: str,
    skill_ids: list[int],
) -> Candidate:
    candidate = Candidate(name=name, birthday=birthday, phone_number=phone_number, email=email)
    candidate.candidate_skills = [CandidateSkill(skill_id=s) for s in skill_ids]
    db.add(candidate)
    await db.commit()
    return candidate


@pytest_asyncio.fixture
async def petar(db_session: AsyncSession, skills) -> Candidate:
    """Candidate with skills C#, English, Database Design."""
    return await _add_candidate(
        db_session, "Petar Petrovic", date(1990, 5, 24),
        "+381623457998", "petar.petrovic@gmail.com", [1, 4, 5],
    )


@pytest_asyncio.fixture
async def ana(db_session: AsyncSession, skills) -> Candidate:
    """Candidate with skills JavaScript, English, Russian."""
    return await _add_candidate(
        db_session, "Ana Anic", date(2002, 12, 4),
        "+381656783207", "ana.anic@gmail.com", [2, 4, 7],
    )


@pytest_asyncio.fixture
async def mariana(db_session: AsyncSession, skills) -> Candidate:
    """Candidate with skills C#, SQL, Project Management."""
    return await _add_candidate(
        db_session, "mariana", date(1986, 3, 5),
        "+381630096381", "mariana@gmail.com", [1, 3, 6],
    )
