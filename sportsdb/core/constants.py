"""Core constants: cache key prefixes and shared literal values."""

# Cache key prefixes
CACHE_PREFIX_POPULAR_SEARCHES = "search:popular"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Default scale applied to the text-search rank before popularity is added.
RELEVANCE_WEIGHT = 100.0
