"""Pydantic request/response schemas for the HTTP API."""

from sportsdb.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from sportsdb.schemas.search import (
    PopularSearchItem,
    PopularSearchesResponse,
    SearchResponse,
    SearchResultResponse,
)

__all__ = [
    "HealthResponse",
    "PopularSearchItem",
    "PopularSearchesResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SearchResponse",
    "SearchResultResponse",
]
