"""Application DTOs (no ORM dependency)."""

from sportsdb.application.dtos.search import (
    PopularSearch,
    QuerySpec,
    RankedCandidate,
    SearchDocument,
    SearchResult,
    TokenQuery,
)

__all__ = [
    "PopularSearch",
    "QuerySpec",
    "RankedCandidate",
    "SearchDocument",
    "SearchResult",
    "TokenQuery",
]
