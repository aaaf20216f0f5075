"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from sportsdb.domain.enums import EntityType
from sportsdb.domain.exceptions import (
    SportsDbException,
    SqlNotConfiguredException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    # Enums
    "EntityType",
    # Exceptions
    "SportsDbException",
    "SqlNotConfiguredException",
    "StoreUnavailableException",
    "ValidationException",
]
