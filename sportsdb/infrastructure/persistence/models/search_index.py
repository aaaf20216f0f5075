"""SearchIndexEntry ORM model. One row per searchable player, team, competition, or venue.

Rows are written by the entity-management flows that own those entities;
this service only reads them.
"""

from sqlalchemy import Float, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from sportsdb.infrastructure.persistence.database import Base
from sportsdb.infrastructure.persistence.models.mixins import UpdatedAtMixin, UuidMixin


class SearchIndexEntry(UuidMixin, UpdatedAtMixin, Base):
    """Search document. Table: search_index. Unique: (entity_type, slug)."""

    __tablename__ = "search_index"

    entity_type: Mapped[str] = mapped_column(String(32), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Set for players only
    popularity_score: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("idx_search_entity_type", "entity_type"),
        UniqueConstraint("entity_type", "slug", name="uq_search_index_entity_type_slug"),
    )
