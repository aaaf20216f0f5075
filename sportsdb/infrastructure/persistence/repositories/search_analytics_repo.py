"""Search analytics repository: append search usage rows and aggregate popular queries.

Uses its own short-lived sessions (not the request session) because recording
runs as a background task after the response is sent.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sportsdb.application.dtos.search import PopularSearch
from sportsdb.domain.enums import EntityType
from sportsdb.infrastructure.persistence.models.search_analytics import SearchAnalytics
from sportsdb.infrastructure.persistence.repositories.search_repo import store_errors


class SearchAnalyticsRepository:
    """Append-only search log with a trending aggregate."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def record(
        self,
        query: str,
        results_count: int,
        entity_type: EntityType | None,
    ) -> None:
        """Insert one search_analytics row and commit."""
        row = SearchAnalytics(
            query=query,
            results_count=results_count,
            entity_type=entity_type.value if entity_type else None,
        )
        with store_errors("record_search"):
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()

    async def popular_searches(self, since: datetime, limit: int) -> list[PopularSearch]:
        """Queries grouped by text since the given time, most frequent first."""
        search_count = func.count(SearchAnalytics.id).label("search_count")
        stmt = (
            select(SearchAnalytics.query, search_count)
            .where(SearchAnalytics.searched_at >= since)
            .group_by(SearchAnalytics.query)
            .order_by(desc(search_count), SearchAnalytics.query)
            .limit(limit)
        )
        with store_errors("popular_searches"):
            async with self._session_factory() as session:
                r = await session.execute(stmt)
                rows = r.all()
        return [PopularSearch(query=row.query, count=int(row.search_count)) for row in rows]
