"""Application services: query normalization, popularity prior, ranking, result shaping."""

from sportsdb.application.services.latest_search import (
    LatestSearchRunner,
    SearchSuperseded,
)
from sportsdb.application.services.popularity import PopularityPrior
from sportsdb.application.services.query_normalizer import normalize_query
from sportsdb.application.services.ranking import LexicalRanker, order_candidates
from sportsdb.application.services.result_shaper import shape_result, shape_results

__all__ = [
    "LatestSearchRunner",
    "LexicalRanker",
    "PopularityPrior",
    "SearchSuperseded",
    "normalize_query",
    "order_candidates",
    "shape_result",
    "shape_results",
]
