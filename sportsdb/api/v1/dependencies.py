"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the search use case.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from sportsdb.application.services.popularity import PopularityPrior
from sportsdb.application.services.ranking import LexicalRanker
from sportsdb.application.use_cases.search import SearchService
from sportsdb.core.config import get_settings
from sportsdb.infrastructure.cache.redis_cache import CacheService
from sportsdb.infrastructure.persistence.database import get_db, session_factory
from sportsdb.infrastructure.persistence.repositories import (
    SearchAnalyticsRepository,
    SearchIndexRepository,
)


async def get_search_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SearchIndexRepository:
    """Search index repository (read-only, request-scoped session)."""
    return SearchIndexRepository(db)


async def get_analytics_repo() -> SearchAnalyticsRepository | None:
    """Analytics repository on its own sessions; None when no database is configured."""
    factory = session_factory()
    if factory is None:
        return None
    return SearchAnalyticsRepository(factory)


async def get_cache(request: Request) -> CacheService | None:
    """Cache started in lifespan (None when Redis is disabled)."""
    return getattr(request.app.state, "cache", None)


async def get_search_service(
    search_repo: Annotated[SearchIndexRepository, Depends(get_search_repo)],
    analytics_repo: Annotated[
        SearchAnalyticsRepository | None, Depends(get_analytics_repo)
    ],
    cache: Annotated[CacheService | None, Depends(get_cache)],
) -> SearchService:
    """Search use case wired with ranking weight, candidate pool, and trending window from settings."""
    settings = get_settings()
    return SearchService(
        search_repo=search_repo,
        analytics_repo=analytics_repo,
        ranker=LexicalRanker(
            popularity=PopularityPrior(),
            relevance_weight=settings.search_relevance_weight,
        ),
        candidate_pool_size=settings.search_candidate_pool_size,
        trending_window_hours=settings.search_trending_window_hours,
        cache=cache,
        cache_ttl=settings.cache_ttl_popular_searches,
    )
