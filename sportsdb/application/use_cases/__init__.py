"""Application use cases: one entry point per workflow."""

from sportsdb.application.use_cases.search import SearchService

__all__ = [
    "SearchService",
]
