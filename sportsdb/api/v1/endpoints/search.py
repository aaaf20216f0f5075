"""Search API: ranked entity search and trending queries."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request

from sportsdb.api.v1.dependencies import get_search_service
from sportsdb.application.use_cases.search import SearchService
from sportsdb.core.config import get_settings
from sportsdb.core.limiter import limit_search
from sportsdb.domain.enums import EntityType
from sportsdb.domain.exceptions import ValidationException
from sportsdb.schemas.search import (
    PopularSearchItem,
    PopularSearchesResponse,
    SearchResponse,
    SearchResultResponse,
)

router = APIRouter()


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    background_tasks: BackgroundTasks,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500, description="Free-text query"),
    entity_type: EntityType | None = Query(
        None, alias="type", description="Restrict to one entity kind"
    ),
    limit: int | None = Query(None, ge=1, description="Maximum results"),
):
    """Search players, teams, competitions, and venues.

    Blank queries return an empty result. The search is logged for trending
    after the response is sent; a logging failure never affects the response.
    """
    settings = get_settings()
    if limit is None:
        limit = settings.search_default_limit
    if limit > settings.search_max_limit:
        raise ValidationException(
            f"limit must be at most {settings.search_max_limit}", field="limit"
        )
    if not q.strip():
        return SearchResponse(results=[], total=0, query="")

    results = await search_svc.search(q, entity_type=entity_type, limit=limit)
    background_tasks.add_task(search_svc.record_search, q, len(results), entity_type)
    return SearchResponse(
        results=[SearchResultResponse.model_validate(r) for r in results],
        total=len(results),
        query=q,
    )


@router.get("/popular", response_model=PopularSearchesResponse)
async def popular_searches(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    limit: int = Query(15, ge=1, le=50),
):
    """Most searched queries in the trending window (cached when Redis is enabled)."""
    searches = await search_svc.popular_searches(limit=limit)
    return PopularSearchesResponse(
        searches=[PopularSearchItem.model_validate(s) for s in searches]
    )
