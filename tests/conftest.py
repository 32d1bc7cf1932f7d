"""Shared pytest fixtures for the users API tests."""

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from users_api.api import deps
from users_api.db.session import init_models
from users_api.main import app as fastapi_app


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """Async engine bound to a fresh SQLite file with the users table created."""
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """A session for repository-level tests; rolled back afterwards."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]):
    """The FastAPI app with `get_db` pointed at the per-test database."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[deps.get_db] = _get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def user_payload():
    """Build a request body; keyword arguments override individual fields."""

    def _build(**overrides: object) -> dict[str, object]:
        body: dict[str, object] = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "department": "Engineering",
        }
        body.update(overrides)
        return body

    return _build
