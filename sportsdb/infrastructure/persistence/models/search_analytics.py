"""SearchAnalytics ORM model. Append-only log of executed searches."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from sportsdb.infrastructure.persistence.database import Base
from sportsdb.infrastructure.persistence.models.mixins import UuidMixin


class SearchAnalytics(UuidMixin, Base):
    """Search usage row. Table: search_analytics. Indexes: query, searched_at."""

    __tablename__ = "search_analytics"

    query: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    results_count: Mapped[int] = mapped_column(Integer, nullable=False)
    # Type filter used for the search, if any
    entity_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    searched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
