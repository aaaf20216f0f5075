"""Result shaping: map primary or fallback rows onto SearchResult.

Primary-path hits arrive as RankedCandidate, fallback hits as SearchDocument,
and raw store rows may use snake_case (SQL) or camelCase (JSON) keys. Every
path goes through shape_result so callers never branch on row shape. Ranking
internals (relevance_rank, combined_score, popularity_score) are dropped.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from sportsdb.application.dtos.search import RankedCandidate, SearchDocument, SearchResult
from sportsdb.domain.enums import EntityType

SearchRow = RankedCandidate | SearchDocument | Mapping[str, Any]


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in row:
            return row[key]
    return None


def _from_mapping(row: Mapping[str, Any]) -> SearchResult:
    return SearchResult(
        id=str(row["id"]),
        entity_type=EntityType(_pick(row, "entity_type", "entityType")),
        slug=row["slug"],
        name=row["name"],
        subtitle=row.get("subtitle"),
        meta=row.get("meta"),
    )


def shape_result(item: SearchRow) -> SearchResult:
    """Return the canonical SearchResult for one hit from either search path."""
    if isinstance(item, RankedCandidate):
        item = item.document
    if isinstance(item, SearchDocument):
        return SearchResult(
            id=item.id,
            entity_type=item.entity_type,
            slug=item.slug,
            name=item.name,
            subtitle=item.subtitle,
            meta=item.meta,
        )
    return _from_mapping(item)


def shape_results(items: Iterable[SearchRow]) -> list[SearchResult]:
    """Shape a sequence of hits, preserving order."""
    return [shape_result(item) for item in items]
