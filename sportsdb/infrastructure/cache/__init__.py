"""Cache: Redis service used for the popular searches listing.

Cache failures never fail a request; the service degrades to the database.
"""

from sportsdb.infrastructure.cache.cache_protocol import CacheProtocol
from sportsdb.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
]
