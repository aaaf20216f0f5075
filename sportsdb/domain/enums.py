"""Domain enumerations for the sportsdb search service."""

from enum import Enum


class EntityType(str, Enum):
    """Kind of entity a search document describes.

    Closed set; adding a kind also means deciding its popularity strategy
    (see application.services.popularity).
    """

    PLAYER = "player"
    TEAM = "team"
    COMPETITION = "competition"
    VENUE = "venue"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid entity type values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [entity_type.value for entity_type in cls]
