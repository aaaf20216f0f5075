"""Search index repository. PostgreSQL full-text (tsvector) and ILIKE queries on search_index."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import or_, select, text
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from sportsdb.application.dtos.search import SearchDocument, TokenQuery
from sportsdb.domain.enums import EntityType
from sportsdb.domain.exceptions import StoreUnavailableException
from sportsdb.infrastructure.persistence.models.search_index import SearchIndexEntry

logger = logging.getLogger(__name__)

# Same expression as the GIN index in the search_index migration.
_DOCUMENT_VECTOR = (
    "to_tsvector('english', coalesce(name, '') || ' ' || coalesce(subtitle, '') "
    "|| ' ' || coalesce(meta, ''))"
)


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards (% and _) and the escape char so value is literal."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate connection-level database failures into StoreUnavailableException.

    SQL errors caused by the statement itself (ProgrammingError, DataError)
    are left alone so they surface as bugs.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logger.error("Search store unavailable during %s: %s", operation, e.orig or e)
        raise StoreUnavailableException(operation, type(e).__name__) from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        logger.error("Search store connection lost during %s", operation)
        raise StoreUnavailableException(operation, "connection_invalidated") from e
    except (TimeoutError, OSError) as e:
        logger.error("Search store timed out or refused connection during %s: %s", operation, e)
        raise StoreUnavailableException(operation, type(e).__name__) from e


def _row_to_document(row: Mapping[str, Any]) -> SearchDocument:
    """Map a raw SQL row (snake_case columns) to SearchDocument."""
    popularity = row.get("popularity_score")
    return SearchDocument(
        id=str(row["id"]),
        entity_type=EntityType(row["entity_type"]),
        slug=row["slug"],
        name=row["name"],
        subtitle=row["subtitle"],
        meta=row["meta"],
        popularity_score=float(popularity) if popularity is not None else None,
    )


def _entry_to_document(entry: SearchIndexEntry) -> SearchDocument:
    """Map an ORM SearchIndexEntry to SearchDocument."""
    return SearchDocument(
        id=str(entry.id),
        entity_type=EntityType(entry.entity_type),
        slug=entry.slug,
        name=entry.name,
        subtitle=entry.subtitle,
        meta=entry.meta,
        popularity_score=entry.popularity_score,
    )


class SearchIndexRepository:
    """Read-only queries over search_index (players, teams, competitions, venues)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def query_ranked(
        self,
        token_query: TokenQuery,
        entity_type: EntityType | None,
        limit: int,
    ) -> list[tuple[SearchDocument, float]]:
        """Documents matching every token as a prefix, with ts_rank relevance.

        Pre-ordered by exact name match, name prefix match, rank, then name so
        that the first limit rows are the head the ranker will keep.
        """
        type_filter = "AND entity_type = :entity_type" if entity_type else ""
        stmt = text(f"""
            SELECT id, entity_type, slug, name, subtitle, meta, popularity_score,
                   ts_rank({_DOCUMENT_VECTOR}, to_tsquery('english', :tsquery)) AS relevance_rank
            FROM search_index
            WHERE {_DOCUMENT_VECTOR} @@ to_tsquery('english', :tsquery)
              {type_filter}
            ORDER BY lower(name) = lower(:raw) DESC,
                     name ILIKE :prefix ESCAPE '\\' DESC,
                     relevance_rank DESC,
                     lower(name) ASC
            LIMIT :limit
        """)
        params: dict[str, Any] = {
            "tsquery": token_query.to_tsquery(),
            "raw": token_query.raw,
            "prefix": f"{escape_like(token_query.raw)}%",
            "limit": limit,
        }
        if entity_type:
            params["entity_type"] = entity_type.value
        with store_errors("query_ranked"):
            r = await self.db.execute(stmt, params)
            rows = r.mappings().all()
        return [(_row_to_document(row), float(row["relevance_rank"] or 0.0)) for row in rows]

    async def query_substring(
        self,
        raw_query: str,
        entity_type: EntityType | None,
        limit: int,
    ) -> list[SearchDocument]:
        """Case-insensitive substring match on name, subtitle, or meta. Storage order."""
        pattern = f"%{escape_like(raw_query)}%"
        filters = [
            or_(
                SearchIndexEntry.name.ilike(pattern, escape="\\"),
                SearchIndexEntry.subtitle.ilike(pattern, escape="\\"),
                SearchIndexEntry.meta.ilike(pattern, escape="\\"),
            )
        ]
        if entity_type:
            filters.append(SearchIndexEntry.entity_type == entity_type.value)
        stmt = select(SearchIndexEntry).where(*filters).limit(limit)
        with store_errors("query_substring"):
            r = await self.db.execute(stmt)
            entries = r.scalars().all()
        return [_entry_to_document(entry) for entry in entries]

    async def ping(self) -> None:
        """Round-trip to the store; raises StoreUnavailableException on failure."""
        with store_errors("ping"):
            await self.db.execute(text("SELECT 1"))
