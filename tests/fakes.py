"""In-memory test doubles for the search index."""

import unicodedata

from sportsdb.application.dtos.search import SearchDocument, TokenQuery
from sportsdb.domain.enums import EntityType


def _fold(value: str) -> str:
    """Lowercase and drop diacritics, the way the document side of the index is built."""
    decomposed = unicodedata.normalize("NFKD", value.lower())
    return decomposed.encode("ascii", "ignore").decode("ascii")


def _document_words(document: SearchDocument) -> list[str]:
    text = " ".join(p for p in (document.name, document.subtitle, document.meta) if p)
    return "".join(ch if ch.isalnum() else " " for ch in _fold(text)).split()


class FakeSearchIndexRepository:
    """In-memory search index.

    Ranked path: every token must prefix-match a folded document word; rank is
    the share of document words matched. Query tokens are not folded, so a
    diacritic in the query misses the ranked path. Substring path:
    case-insensitive containment in name, subtitle, or meta, in storage order.
    """

    def __init__(self, documents: list[SearchDocument]) -> None:
        self.documents = list(documents)
        self.ranked_calls: list[tuple[TokenQuery, EntityType | None, int]] = []
        self.substring_calls: list[tuple[str, EntityType | None, int]] = []

    def _of_type(self, entity_type: EntityType | None) -> list[SearchDocument]:
        return [d for d in self.documents if entity_type is None or d.entity_type == entity_type]

    async def query_ranked(
        self, token_query: TokenQuery, entity_type: EntityType | None, limit: int
    ) -> list[tuple[SearchDocument, float]]:
        self.ranked_calls.append((token_query, entity_type, limit))
        matches = []
        for document in self._of_type(entity_type):
            words = _document_words(document)
            if not all(any(w.startswith(t) for w in words) for t in token_query.tokens):
                continue
            matched = sum(1 for w in words if any(w.startswith(t) for t in token_query.tokens))
            matches.append((document, matched / len(words)))
        return matches[:limit]

    async def query_substring(
        self, raw_query: str, entity_type: EntityType | None, limit: int
    ) -> list[SearchDocument]:
        self.substring_calls.append((raw_query, entity_type, limit))
        needle = raw_query.lower()
        hits = [
            d
            for d in self._of_type(entity_type)
            if any(needle in (p or "").lower() for p in (d.name, d.subtitle, d.meta))
        ]
        return hits[:limit]


def make_documents() -> list[SearchDocument]:
    """Seed set shared by the use case and API tests."""
    return [
        SearchDocument(
            id="p1",
            entity_type=EntityType.PLAYER,
            slug="erling-haaland",
            name="Erling Haaland",
            subtitle="Manchester City",
            meta="Norway",
            popularity_score=250.0,
        ),
        SearchDocument(
            id="p2",
            entity_type=EntityType.PLAYER,
            slug="alf-inge-haaland",
            name="Alf-Inge Haaland",
            subtitle="Leeds United",
            meta="Norway",
            popularity_score=40.0,
        ),
        SearchDocument(
            id="t1",
            entity_type=EntityType.TEAM,
            slug="manchester-city",
            name="Manchester City",
            subtitle="Premier League",
            meta="England",
        ),
        SearchDocument(
            id="t2",
            entity_type=EntityType.TEAM,
            slug="manchester-united",
            name="Manchester United",
            subtitle="Premier League",
            meta="England",
        ),
        SearchDocument(
            id="v1",
            entity_type=EntityType.VENUE,
            slug="etihad-stadium",
            name="Etihad Stadium",
            subtitle="Manchester",
            meta="England",
        ),
        SearchDocument(
            id="v2",
            entity_type=EntityType.VENUE,
            slug="old-trafford",
            name="Old Trafford",
            subtitle="Manchester",
            meta="England",
        ),
        SearchDocument(
            id="c1",
            entity_type=EntityType.COMPETITION,
            slug="premier-league",
            name="Premier League",
            subtitle="England",
        ),
        SearchDocument(
            id="p3",
            entity_type=EntityType.PLAYER,
            slug="zoe-nandu",
            name="Zoë Ñandú",
            subtitle="Club Atlético",
            meta="Paraguay",
            popularity_score=5.0,
        ),
    ]
