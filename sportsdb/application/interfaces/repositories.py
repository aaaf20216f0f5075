"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sportsdb.application.dtos.search import (
        PopularSearch,
        SearchDocument,
        TokenQuery,
    )
    from sportsdb.domain.enums import EntityType


# Search index repository interface (read-only)
class ISearchIndexRepository(Protocol):
    """Protocol for the search document store.

    Implementations raise StoreUnavailableException when the store cannot be
    reached; an empty list always means "no matches".
    """

    async def query_ranked(
        self,
        token_query: TokenQuery,
        entity_type: EntityType | None,
        limit: int,
    ) -> list[tuple[SearchDocument, float]]:
        """Return documents matching every token (prefix match) with their text rank."""

    async def query_substring(
        self,
        raw_query: str,
        entity_type: EntityType | None,
        limit: int,
    ) -> list[SearchDocument]:
        """Return documents whose name, subtitle, or meta contains raw_query (any order)."""


# Search analytics repository interface (append + aggregate)
class ISearchAnalyticsRepository(Protocol):
    """Protocol for the search usage log."""

    async def record(
        self,
        query: str,
        results_count: int,
        entity_type: EntityType | None,
    ) -> None:
        """Append one query/result-count row."""

    async def popular_searches(
        self, since: datetime, limit: int
    ) -> list[PopularSearch]:
        """Return the most frequent queries recorded at or after since."""
