"""Search API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from sportsdb.domain.enums import EntityType


class SearchResultResponse(BaseModel):
    """Single search hit (player, team, competition, or venue). Serializes entity_type as 'entityType'."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    entity_type: EntityType = Field(
        ...,
        serialization_alias="entityType",
        description="player | team | competition | venue",
    )
    slug: str = Field(..., description="URL-safe identifier of the entity")
    name: str
    subtitle: str | None = Field(None, description="Secondary line, e.g. a player's club")
    meta: str | None = Field(None, description="Extra searchable context, e.g. country")


class SearchResponse(BaseModel):
    """Search response: ordered hits, their count, and the query as received."""

    results: list[SearchResultResponse]
    total: int = Field(..., description="Number of results returned")
    query: str


class PopularSearchItem(BaseModel):
    """One trending query and how often it was searched in the window."""

    model_config = ConfigDict(from_attributes=True)

    query: str
    count: int


class PopularSearchesResponse(BaseModel):
    """Most searched queries in the trending window."""

    searches: list[PopularSearchItem]
