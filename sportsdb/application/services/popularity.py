"""Popularity prior: per-entity-kind prominence score folded into ranking.

Only players carry a nonzero prior today. Each kind resolves through a
strategy table, so a new kind opts in with register() instead of a branch
in the ranker.
"""

from collections.abc import Callable, Mapping

from sportsdb.application.dtos.search import SearchDocument
from sportsdb.domain.enums import EntityType

PopularityStrategy = Callable[[SearchDocument], float]


def _zero(document: SearchDocument) -> float:
    return 0.0


def _stored_score(document: SearchDocument) -> float:
    """Precomputed popularity_score from the index row; missing or negative counts as 0."""
    if document.popularity_score is None:
        return 0.0
    return max(0.0, float(document.popularity_score))


DEFAULT_STRATEGIES: Mapping[EntityType, PopularityStrategy] = {
    EntityType.PLAYER: _stored_score,
}


class PopularityPrior:
    """Resolve popularity_of(entity_type, document) through a strategy table.

    Kinds without a registered strategy score 0.
    """

    def __init__(
        self, strategies: Mapping[EntityType, PopularityStrategy] | None = None
    ) -> None:
        self._strategies: dict[EntityType, PopularityStrategy] = dict(
            DEFAULT_STRATEGIES if strategies is None else strategies
        )

    def register(self, entity_type: EntityType, strategy: PopularityStrategy) -> None:
        """Set (or replace) the strategy used for entity_type."""
        self._strategies[entity_type] = strategy

    def popularity_of(self, entity_type: EntityType, document: SearchDocument) -> float:
        """Return the nonnegative popularity prior for document."""
        strategy = self._strategies.get(entity_type, _zero)
        return strategy(document)
