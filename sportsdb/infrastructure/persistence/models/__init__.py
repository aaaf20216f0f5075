"""ORM models. Import here so Alembic autogenerate sees every table."""

from sportsdb.infrastructure.persistence.models.search_analytics import SearchAnalytics
from sportsdb.infrastructure.persistence.models.search_index import SearchIndexEntry

__all__ = [
    "SearchAnalytics",
    "SearchIndexEntry",
]
