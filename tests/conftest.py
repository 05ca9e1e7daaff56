"""Pytest configuration shared across the suite."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

_DEFAULT_ENV_VARS: dict[str, str] = {
    "ENVIRONMENT": "testing",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "API_KEY": "",
    "DB_CREATE_ALL": "false",
}

for key, value in _DEFAULT_ENV_VARS.items():
    os.environ.setdefault(key, value)

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from access_tokens.adapters.configuration.config import settings  # noqa: E402
from access_tokens.adapters.inbound.api import deps  # noqa: E402
from access_tokens.adapters.outbound.persistence.models import Base  # noqa: E402
from access_tokens.main import app  # noqa: E402

API_KEY = "test-secret-key"


class FrozenClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Configure the gate with a key for the duration of a test."""
    monkeypatch.setattr(settings, "API_KEY", API_KEY)
    return API_KEY


@pytest.fixture
def auth_headers(api_key) -> dict[str, str]:
    return {"X-API-Key": api_key}


@pytest.fixture
async def client(session, clock):
    async def get_db_override():
        yield session

    app.dependency_overrides[deps.get_db_session] = get_db_override
    app.dependency_overrides[deps.get_clock] = lambda: clock

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
