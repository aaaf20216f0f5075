"""Persistence repositories. Re-exports for dependency injection."""

from sportsdb.infrastructure.persistence.repositories.search_analytics_repo import (
    SearchAnalyticsRepository,
)
from sportsdb.infrastructure.persistence.repositories.search_repo import (
    SearchIndexRepository,
)

__all__ = [
    "SearchAnalyticsRepository",
    "SearchIndexRepository",
]
