"""Tests for LexicalRanker scoring and the tie-break order."""

from sportsdb.application.dtos.search import RankedCandidate, SearchDocument, TokenQuery
from sportsdb.application.services.popularity import PopularityPrior
from sportsdb.application.services.ranking import LexicalRanker, order_candidates
from sportsdb.core.constants import RELEVANCE_WEIGHT
from sportsdb.domain.enums import EntityType


def _doc(
    id: str,
    name: str,
    entity_type: EntityType = EntityType.TEAM,
    popularity: float | None = None,
) -> SearchDocument:
    return SearchDocument(
        id=id,
        entity_type=entity_type,
        slug=id,
        name=name,
        popularity_score=popularity,
    )


def _tq(raw: str) -> TokenQuery:
    return TokenQuery(raw=raw, tokens=tuple(raw.lower().split()))


def _names(ranked: list[RankedCandidate]) -> list[str]:
    return [c.document.name for c in ranked]


class TestCombinedScore:
    def test_default_weight_is_one_hundred(self) -> None:
        assert RELEVANCE_WEIGHT == 100.0
        assert LexicalRanker().relevance_weight == 100.0

    def test_rank_times_weight_plus_player_popularity(self) -> None:
        ranker = LexicalRanker()
        doc = _doc("p", "Someone", EntityType.PLAYER, popularity=12.5)
        assert ranker.combined_score(doc, 0.5) == 0.5 * 100.0 + 12.5

    def test_non_player_ignores_stored_popularity(self) -> None:
        ranker = LexicalRanker()
        doc = _doc("t", "Somewhere", EntityType.TEAM, popularity=500.0)
        assert ranker.combined_score(doc, 0.25) == 25.0

    def test_custom_weight(self) -> None:
        ranker = LexicalRanker(relevance_weight=10.0)
        doc = _doc("p", "Someone", EntityType.PLAYER, popularity=1.0)
        assert ranker.combined_score(doc, 0.5) == 6.0


class TestRank:
    def test_higher_text_rank_beats_small_popularity_gap(self) -> None:
        """At weight 100, 0.3 rank difference outweighs a popularity gap of 20."""
        ranker = LexicalRanker()
        strong = _doc("a", "Alpha Smith", EntityType.PLAYER, popularity=0.0)
        popular = _doc("b", "Bravo Smith", EntityType.PLAYER, popularity=20.0)
        ranked = ranker.rank(_tq("smith"), [(popular, 0.1), (strong, 0.4)], limit=10)
        assert _names(ranked) == ["Alpha Smith", "Bravo Smith"]

    def test_popularity_breaks_near_ties(self) -> None:
        ranker = LexicalRanker()
        quiet = _doc("a", "Alpha Smith", EntityType.PLAYER, popularity=1.0)
        famous = _doc("b", "Bravo Smith", EntityType.PLAYER, popularity=50.0)
        ranked = ranker.rank(_tq("smith"), [(quiet, 0.31), (famous, 0.30)], limit=10)
        assert _names(ranked) == ["Bravo Smith", "Alpha Smith"]

    def test_zero_weight_orders_by_popularity(self) -> None:
        ranker = LexicalRanker(relevance_weight=0.0)
        a = _doc("a", "Alpha Smith", EntityType.PLAYER, popularity=1.0)
        b = _doc("b", "Bravo Smith", EntityType.PLAYER, popularity=2.0)
        ranked = ranker.rank(_tq("smith"), [(a, 0.9), (b, 0.1)], limit=10)
        assert _names(ranked) == ["Bravo Smith", "Alpha Smith"]

    def test_truncates_to_limit_after_ordering(self) -> None:
        ranker = LexicalRanker()
        docs = [(_doc(str(i), f"Club {i}"), i / 10) for i in range(1, 6)]
        ranked = ranker.rank(_tq("club"), docs, limit=2)
        assert _names(ranked) == ["Club 5", "Club 4"]

    def test_exact_match_beats_higher_score(self) -> None:
        ranker = LexicalRanker()
        exact = _doc("t1", "Manchester City", EntityType.TEAM)
        player = _doc("p1", "Erling Haaland", EntityType.PLAYER, popularity=250.0)
        ranked = ranker.rank(
            _tq("manchester city"), [(player, 0.9), (exact, 0.1)], limit=10
        )
        assert ranked[0].document.id == "t1"

    def test_custom_popularity_prior_is_used(self) -> None:
        prior = PopularityPrior()
        prior.register(EntityType.TEAM, lambda d: 1000.0 if d.id == "b" else 0.0)
        ranker = LexicalRanker(popularity=prior)
        a = _doc("a", "Alpha United")
        b = _doc("b", "Bravo United")
        ranked = ranker.rank(_tq("united"), [(a, 0.9), (b, 0.1)], limit=10)
        assert _names(ranked) == ["Bravo United", "Alpha United"]

    def test_empty_matches(self) -> None:
        assert LexicalRanker().rank(_tq("x"), [], limit=5) == []


def _cand(id: str, name: str, score: float, entity_type: EntityType = EntityType.TEAM) -> RankedCandidate:
    return RankedCandidate(
        document=_doc(id, name, entity_type),
        relevance_rank=0.0,
        combined_score=score,
    )


class TestOrderCandidates:
    """Tie-break order: exact, prefix, combined score, name, (type, id)."""

    def test_exact_then_prefix_then_score(self) -> None:
        candidates = [
            _cand("1", "FC Barcelona", 90.0),
            _cand("2", "Barcelona SC", 10.0),
            _cand("3", "Barcelona", 1.0),
        ]
        ordered = order_candidates(candidates, "barcelona")
        assert [c.document.id for c in ordered] == ["3", "2", "1"]

    def test_exact_match_is_case_insensitive_and_trimmed(self) -> None:
        candidates = [_cand("1", "Other", 50.0), _cand("2", "ARSENAL", 0.0)]
        ordered = order_candidates(candidates, "  arsenal ")
        assert ordered[0].document.id == "2"

    def test_equal_scores_fall_back_to_name(self) -> None:
        candidates = [_cand("1", "Zeta Town", 5.0), _cand("2", "alpha town", 5.0)]
        ordered = order_candidates(candidates, "town")
        assert [c.document.name for c in ordered] == ["alpha town", "Zeta Town"]

    def test_identical_names_are_totally_ordered(self) -> None:
        candidates = [
            _cand("b", "Rangers", 5.0, EntityType.TEAM),
            _cand("a", "Rangers", 5.0, EntityType.TEAM),
            _cand("z", "Rangers", 5.0, EntityType.COMPETITION),
        ]
        first = order_candidates(candidates, "rangers fc")
        second = order_candidates(list(reversed(candidates)), "rangers fc")
        assert [c.document.id for c in first] == ["z", "a", "b"]
        assert first == second

    def test_does_not_mutate_input(self) -> None:
        candidates = [_cand("1", "B", 1.0), _cand("2", "A", 2.0)]
        snapshot = list(candidates)
        order_candidates(candidates, "x")
        assert candidates == snapshot

    def test_case_folding_matches_sql_lower(self) -> None:
        """Folding is lower(), as in the SQL pre-order: "STRASSE" is not "Straße"."""
        candidates = [_cand("1", "Strasse Rovers", 50.0), _cand("2", "Straße", 1.0)]
        assert order_candidates(candidates, "STRASSE")[0].document.id == "1"
        assert order_candidates(candidates, "STRASSE ROVERS")[0].document.id == "1"
        assert order_candidates(candidates, "STRAßE")[0].document.id == "2"
