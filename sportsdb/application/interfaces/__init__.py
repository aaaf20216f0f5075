"""Application ports (Protocols) implemented by infrastructure."""

from sportsdb.application.interfaces.repositories import (
    ISearchAnalyticsRepository,
    ISearchIndexRepository,
)

__all__ = [
    "ISearchAnalyticsRepository",
    "ISearchIndexRepository",
]
