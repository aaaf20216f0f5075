"""DTOs for search (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass

from sportsdb.domain.enums import EntityType
from sportsdb.domain.exceptions import ValidationException


@dataclass(frozen=True)
class SearchDocument:
    """Indexed representation of one player, team, competition, or venue (read-model)."""

    id: str
    entity_type: EntityType
    slug: str
    name: str
    subtitle: str | None = None
    meta: str | None = None
    # Only meaningful for players; other kinds rank as if it were 0
    popularity_score: float | None = None


@dataclass(frozen=True)
class RankedCandidate:
    """Primary-path hit with its ranking internals. Never returned to callers."""

    document: SearchDocument
    relevance_rank: float
    combined_score: float


@dataclass(frozen=True)
class SearchResult:
    """Caller-facing search hit. Carries no ranking internals."""

    id: str
    entity_type: EntityType
    slug: str
    name: str
    subtitle: str | None
    meta: str | None


@dataclass(frozen=True)
class QuerySpec:
    """One search request: raw text, optional type filter, and result cap."""

    raw_query: str
    entity_type: EntityType | None = None
    limit: int = 10

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not read as limit=1
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValidationException(
                f"limit must be a positive integer, got {self.limit}", field="limit"
            )


@dataclass(frozen=True)
class TokenQuery:
    """Normalized query: trimmed raw text plus non-empty AND-ed prefix tokens."""

    raw: str
    tokens: tuple[str, ...]

    def to_tsquery(self) -> str:
        """Render as a PostgreSQL to_tsquery expression (each token a prefix match)."""
        return " & ".join(f"{token}:*" for token in self.tokens)


@dataclass(frozen=True)
class PopularSearch:
    """Aggregated query frequency over the trending window."""

    query: str
    count: int
