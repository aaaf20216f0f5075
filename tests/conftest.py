"""Pytest configuration and fixtures for sportsdb.

HTTP tests run sportsdb.main:app over ASGITransport with the search service
overridden to use an in-memory index. Repository tests that need Postgres use
the db_session fixture and are marked requires_db.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from sportsdb.api.v1.dependencies import get_search_service
from sportsdb.application.use_cases.search import SearchService
from sportsdb.core.limiter import limiter
from sportsdb.infrastructure.persistence import database
from sportsdb.main import app

from tests.fakes import FakeSearchIndexRepository, make_documents


@pytest.fixture
def search_repo() -> FakeSearchIndexRepository:
    """In-memory search index seeded with players, teams, venues, and a competition."""
    return FakeSearchIndexRepository(make_documents())


@pytest.fixture
def analytics_repo() -> AsyncMock:
    """Analytics repository double; record() succeeds, popular_searches() returns []."""
    repo = AsyncMock()
    repo.popular_searches.return_value = []
    return repo


@pytest.fixture
def search_service(
    search_repo: FakeSearchIndexRepository, analytics_repo: AsyncMock
) -> SearchService:
    return SearchService(search_repo=search_repo, analytics_repo=analytics_repo)


@pytest.fixture
def disabled_limiter():
    """Turn rate limiting off for the duration of a test."""
    limiter.enabled = False
    yield limiter
    limiter.enabled = True


@pytest.fixture
async def client(search_service: SearchService, disabled_limiter) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with the in-memory search service."""
    app.dependency_overrides[get_search_service] = lambda: search_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL. Skips (pytest.skip) when Postgres is not configured.
    Use @pytest.mark.requires_db to mark tests that need this fixture; run
    without DB via: pytest -m 'not requires_db'.
    """
    factory = database.session_factory()
    if factory is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with factory() as session:
        yield session
        await session.rollback()
