"""Latest-only search runner for callers that issue searches as the user types.

search() itself is stateless and never cancels anything. This wrapper sits at
the integration boundary: each submit() cancels the previous in-flight
submission from the same runner, optionally waits a debounce delay, then runs
the search. Callers whose submission was superseded get SearchSuperseded.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from sportsdb.application.dtos.search import SearchResult
from sportsdb.domain.enums import EntityType

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, EntityType | None, int], Awaitable[list[SearchResult]]]


class SearchSuperseded(Exception):
    """Raised to the caller of a submission replaced by a newer one."""

    def __init__(self, raw_query: str) -> None:
        self.raw_query = raw_query
        super().__init__(f"Search superseded: {raw_query!r}")


class LatestSearchRunner:
    """Run at most one search at a time; a newer submit() cancels the older one."""

    def __init__(self, search_fn: SearchFn, debounce_seconds: float = 0.0) -> None:
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")
        self._search_fn = search_fn
        self._debounce_seconds = debounce_seconds
        self._current: asyncio.Task[list[SearchResult]] | None = None

    @property
    def in_flight(self) -> bool:
        """True while a submission is pending or running."""
        return self._current is not None and not self._current.done()

    async def _run(
        self, raw_query: str, entity_type: EntityType | None, limit: int
    ) -> list[SearchResult]:
        if self._debounce_seconds:
            await asyncio.sleep(self._debounce_seconds)
        return await self._search_fn(raw_query, entity_type, limit)

    def cancel(self) -> None:
        """Cancel the in-flight submission, if any."""
        task = self._current
        if task is not None and not task.done():
            task.cancel()

    async def submit(
        self,
        raw_query: str,
        entity_type: EntityType | None = None,
        limit: int = 10,
    ) -> list[SearchResult]:
        """Run a search, superseding any earlier submission still in flight.

        Raises:
            SearchSuperseded: A newer submit() (or cancel()) replaced this one.
        """
        if self.in_flight:
            logger.debug("Cancelling superseded search before %r", raw_query)
        self.cancel()
        task = asyncio.ensure_future(self._run(raw_query, entity_type, limit))
        self._current = task
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if task.cancelled() and not (current is not None and current.cancelling()):
                raise SearchSuperseded(raw_query) from None
            raise
        finally:
            if self._current is task:
                self._current = None
