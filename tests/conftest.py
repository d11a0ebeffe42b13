"""
Test fixtures for the study hub backend.

Every test gets its own file-based SQLite database and upload directory
under tmp_path. `client` drives the HTTP API; `db` is a bare session for
service-level tests.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from studyhub.core.config import Settings
from studyhub.db.base import Base
from studyhub.db.session import build_engine, build_session_factory
from studyhub.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        upload_dir=str(tmp_path / "uploads"),
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP client; the context manager runs the lifespan so tables exist."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def session_factory(settings):
    """Session factory over a fresh schema, for tests needing several sessions."""
    engine = build_engine(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    """Direct session for service tests."""
    async with session_factory() as session:
        yield session
