"""Health check endpoints, used for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sportsdb.domain.exceptions import StoreUnavailableException
from sportsdb.infrastructure.persistence.database import session_factory
from sportsdb.infrastructure.persistence.repositories import SearchIndexRepository
from sportsdb.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_ready(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(status="not_ready", message=message).model_dump(),
    )


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Search store unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 if the search store answers SELECT 1; 503 otherwise."""
    factory = session_factory()
    if factory is None:
        return _not_ready("DATABASE_URL is not configured")
    try:
        async with factory() as session:
            await SearchIndexRepository(session).ping()
    except StoreUnavailableException as e:
        logger.warning("Readiness check failed: %s", e.message)
        return _not_ready(e.message)
    return ReadinessResponse()
