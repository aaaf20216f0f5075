"""Query normalization: raw user text to AND-ed prefix tokens."""

from sportsdb.application.dtos.search import TokenQuery


def _strip_punctuation(value: str) -> str:
    """Replace every character that is not a letter, digit, or whitespace with a space."""
    return "".join(ch if ch.isalnum() or ch.isspace() else " " for ch in value)


def normalize_query(raw_query: str) -> TokenQuery | None:
    """Turn raw input into a TokenQuery.

    Returns None when nothing searchable is left (empty or punctuation-only
    input); callers treat that as an empty result, not an error. No minimum
    token length is enforced.
    """
    trimmed = (raw_query or "").strip()
    tokens = tuple(
        token.lower() for token in _strip_punctuation(trimmed).split() if token
    )
    if not tokens:
        return None
    return TokenQuery(raw=trimmed, tokens=tokens)

