"""Service test fixtures — async DB, FastAPI test client, tokens and record factories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - get_today pinned to FIXED_TODAY (a fall date) so seasonal queries are deterministic
    - db_manager patched so the readiness probe sees the test engine
"""

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import sports_schedule.infrastructure.database as db_module
from sports_schedule.api.dependencies import get_today
from sports_schedule.config import get_settings
from sports_schedule.core.domain_types import DEFAULT_OPPONENT_NAME, Identity
from sports_schedule.db.base import Base
from sports_schedule.infrastructure.database import DatabaseSessionManager, get_db
from sports_schedule.infrastructure.tokens import TokenCodec
from sports_schedule.main import app
from sports_schedule.models.event import Event
from sports_schedule.models.league import League
from sports_schedule.models.team import Team

FIXED_TODAY = date(2026, 10, 19)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Tokens ──────────────────────────────────────────────────────

def _bearer(identity: Identity) -> dict[str, str]:
    settings = get_settings()
    codec = TokenCodec(settings.jwt_secret, settings.jwt_algorithm)
    token = codec.issue(identity, timedelta(minutes=5))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return _bearer(Identity(user_id="admin-1", name="coach", is_admin=True))


@pytest.fixture
def user_headers():
    return _bearer(Identity(user_id="user-1", name="parent", is_admin=False))


# ─── Record factories ────────────────────────────────────────────

@pytest.fixture
def make_league(test_db):
    async def _make(**overrides) -> League:
        values = {
            "season": "fall", "sport": "basketball", "age_group": "u14",
            "division": "a", "gender": "girls",
        }
        values.update(overrides)
        league = League(**values)
        test_db.add(league)
        await test_db.commit()
        await test_db.refresh(league)
        return league
    return _make


@pytest.fixture
def make_team(test_db):
    async def _make(league_id: str, **overrides) -> Team:
        values = {
            "league_id": league_id, "name": "Hawks",
            "school": "Northside", "location": "North Gym",
        }
        values.update(overrides)
        team = Team(**values)
        test_db.add(team)
        await test_db.commit()
        await test_db.refresh(team)
        return team
    return _make


@pytest.fixture
def make_event(test_db):
    async def _make(league_id: str, **overrides) -> Event:
        values = {
            "type": "game", "league_id": league_id, "location": "Main Gym",
            "date": date(2026, 10, 20), "time": "16:00",
            "opposing_team": DEFAULT_OPPONENT_NAME, "opposing_team_id": None,
            "notes": None,
        }
        values.update(overrides)
        event = Event(**values)
        test_db.add(event)
        await test_db.commit()
        await test_db.refresh(event)
        return event
    return _make
