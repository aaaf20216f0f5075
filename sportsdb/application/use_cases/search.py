"""Search use case: ranked entity search with substring fallback, plus usage analytics.

Flow: normalize -> ranked store query -> rank/order (popularity folded in)
-> substring fallback only when the ranked path found nothing, even unfiltered
-> shape.
Store failures propagate as StoreUnavailableException; "no matches" is [].
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from sportsdb.application.dtos.search import (
    PopularSearch,
    QuerySpec,
    SearchResult,
    TokenQuery,
)
from sportsdb.application.services.query_normalizer import normalize_query
from sportsdb.application.services.ranking import LexicalRanker
from sportsdb.application.services.result_shaper import shape_results
from sportsdb.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_POPULAR_SEARCHES
from sportsdb.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from sportsdb.application.interfaces.repositories import (
        ISearchAnalyticsRepository,
        ISearchIndexRepository,
    )
    from sportsdb.domain.enums import EntityType
    from sportsdb.infrastructure.cache.cache_protocol import CacheProtocol

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_POOL_SIZE = 50


def popular_searches_key(limit: int) -> str:
    """Cache key for the popular searches listing of a given size."""
    return f"{CACHE_PREFIX_POPULAR_SEARCHES}{CACHE_KEY_SEP}{limit}"


class SearchService:
    """Search across players, teams, competitions, and venues (read-only)."""

    def __init__(
        self,
        search_repo: "ISearchIndexRepository",
        analytics_repo: "ISearchAnalyticsRepository | None" = None,
        ranker: LexicalRanker | None = None,
        candidate_pool_size: int = DEFAULT_CANDIDATE_POOL_SIZE,
        trending_window_hours: int = 24,
        cache: "CacheProtocol | None" = None,
        cache_ttl: int = 300,
    ) -> None:
        self.search_repo = search_repo
        self.analytics_repo = analytics_repo
        self.ranker = ranker or LexicalRanker()
        self.candidate_pool_size = candidate_pool_size
        self.trending_window_hours = trending_window_hours
        self.cache = cache
        self.cache_ttl = cache_ttl

    @traced("search.search")
    async def search(
        self,
        raw_query: str,
        entity_type: "EntityType | None" = None,
        limit: int = 10,
    ) -> list[SearchResult]:
        """Return up to limit results for raw_query, optionally restricted to entity_type.

        Raises:
            ValidationException: limit is not a positive integer.
            StoreUnavailableException: the search store could not be queried.
        """
        spec = QuerySpec(raw_query=raw_query or "", entity_type=entity_type, limit=limit)
        token_query = normalize_query(spec.raw_query)
        if token_query is None:
            logger.debug("Search query has no tokens; returning no results")
            return []

        pool = max(spec.limit, self.candidate_pool_size)
        matches = await self.search_repo.query_ranked(token_query, spec.entity_type, pool)
        ranked = self.ranker.rank(token_query, matches, spec.limit)
        if ranked:
            add_span_attributes(**{"search.path": "ranked", "search.count": len(ranked)})
            logger.debug(
                "Ranked search %r returned %d of %d candidates",
                token_query.raw,
                len(ranked),
                len(matches),
            )
            return shape_results(ranked)

        if spec.entity_type is not None and await self._has_unfiltered_hits(token_query):
            # The filter narrowed real hits to zero; that is not a miss.
            add_span_attributes(**{"search.path": "filtered_out", "search.count": 0})
            logger.debug(
                "Ranked search %r has hits, none of type %s; skipping fallback",
                token_query.raw,
                spec.entity_type.value,
            )
            return []

        # Fallback rows come back in storage order; they are not re-ranked.
        documents = await self.search_repo.query_substring(
            token_query.raw, spec.entity_type, spec.limit
        )
        add_span_attributes(**{"search.path": "fallback", "search.count": len(documents)})
        logger.debug(
            "Ranked search %r found nothing; substring fallback returned %d",
            token_query.raw,
            len(documents),
        )
        return shape_results(documents[: spec.limit])

    async def _has_unfiltered_hits(self, token_query: TokenQuery) -> bool:
        return bool(await self.search_repo.query_ranked(token_query, None, 1))

    async def record_search(
        self,
        raw_query: str,
        result_count: int,
        entity_type: "EntityType | None" = None,
    ) -> None:
        """Best-effort usage log of a completed search. Never raises."""
        if self.analytics_repo is None:
            return
        query = (raw_query or "").strip()
        if not query:
            return
        try:
            await self.analytics_repo.record(query, result_count, entity_type)
        except Exception:
            # Analytics must not affect search results: log and continue.
            logger.exception("Failed to record search analytics for query %r", query)

    async def popular_searches(self, limit: int = 15) -> list[PopularSearch]:
        """Most frequent queries within the trending window, most searched first.

        Served from cache when available; store failures propagate.
        """
        if self.analytics_repo is None:
            return []
        key = popular_searches_key(limit)
        if self.cache is not None and self.cache.is_available():
            cached = await self.cache.get(key)
            if cached is not None:
                return [PopularSearch(query=item["query"], count=item["count"]) for item in cached]

        since = datetime.now(timezone.utc) - timedelta(hours=self.trending_window_hours)
        searches = await self.analytics_repo.popular_searches(since=since, limit=limit)

        if self.cache is not None and self.cache.is_available():
            await self.cache.set(
                key,
                [{"query": s.query, "count": s.count} for s in searches],
                ttl=self.cache_ttl,
            )
        return searches
