"""Lexical ranking and deterministic tie-break ordering for primary-path hits.

combined_score = relevance_rank * relevance_weight + popularity prior.
The weight is meant to let popularity break near-ties between lexical
matches without overriding a clearly higher text rank; the default of 100
is untuned.

Final order (ascending sort key):
    1. name equals the trimmed raw query (case-insensitive)
    2. name starts with the trimmed raw query (case-insensitive)
    3. combined_score, highest first
    4. name, case-insensitive ascending
    5. (entity_type, id), so equal names still have a total order
"""

from __future__ import annotations

from collections.abc import Iterable

from sportsdb.application.dtos.search import RankedCandidate, SearchDocument, TokenQuery
from sportsdb.application.services.popularity import PopularityPrior
from sportsdb.core.constants import RELEVANCE_WEIGHT


def tie_break_key(
    candidate: RankedCandidate, raw_query: str
) -> tuple[int, int, float, str, str, str]:
    """Sort key implementing the tie-break order for one candidate."""
    # lower(), not casefold(): must agree with the lower(name) pre-order in SQL
    needle = raw_query.strip().lower()
    name = candidate.document.name.lower()
    return (
        0 if name == needle else 1,
        0 if name.startswith(needle) else 1,
        -candidate.combined_score,
        name,
        candidate.document.entity_type.value,
        candidate.document.id,
    )


def order_candidates(
    candidates: Iterable[RankedCandidate], raw_query: str
) -> list[RankedCandidate]:
    """Return candidates in tie-break order (pure; input is not mutated)."""
    return sorted(candidates, key=lambda c: tie_break_key(c, raw_query))


class LexicalRanker:
    """Fold the popularity prior into text ranks, order, and truncate."""

    def __init__(
        self,
        popularity: PopularityPrior | None = None,
        relevance_weight: float = RELEVANCE_WEIGHT,
    ) -> None:
        self.popularity = popularity or PopularityPrior()
        self.relevance_weight = relevance_weight

    def combined_score(self, document: SearchDocument, relevance_rank: float) -> float:
        """relevance_rank * relevance_weight + popularity_of(entity_type, document)."""
        return relevance_rank * self.relevance_weight + self.popularity.popularity_of(
            document.entity_type, document
        )

    def rank(
        self,
        token_query: TokenQuery,
        matches: Iterable[tuple[SearchDocument, float]],
        limit: int,
    ) -> list[RankedCandidate]:
        """Score store matches, apply the tie-break order, and keep the first limit."""
        candidates = [
            RankedCandidate(
                document=document,
                relevance_rank=float(rank),
                combined_score=self.combined_score(document, float(rank)),
            )
            for document, rank in matches
        ]
        return order_candidates(candidates, token_query.raw)[:limit]
