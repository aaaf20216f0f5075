"""create search_index and search_analytics tables

Revision ID: a1c4e7f2b9d0
Revises:
Create Date: 2026-10-18

search_index holds one document per player, team, competition, and venue;
a GIN expression index backs the english tsvector match used by ranked
search. search_analytics is the append-only usage log.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c4e7f2b9d0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "search_index",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("entity_type", sa.String(length=32), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("subtitle", sa.Text(), nullable=True),
        sa.Column("meta", sa.Text(), nullable=True),
        sa.Column("popularity_score", sa.Float(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint(
            "entity_type IN ('player', 'team', 'competition', 'venue')",
            name="ck_search_index_entity_type",
        ),
        sa.CheckConstraint("name <> ''", name="ck_search_index_name_not_empty"),
        sa.UniqueConstraint(
            "entity_type", "slug", name="uq_search_index_entity_type_slug"
        ),
    )
    op.create_index("idx_search_entity_type", "search_index", ["entity_type"])
    op.execute(
        """
        CREATE INDEX ix_search_index_document_vector ON search_index
        USING gin (to_tsvector('english', coalesce(name, '') || ' '
          || coalesce(subtitle, '') || ' ' || coalesce(meta, '')))
        """
    )

    op.create_table(
        "search_analytics",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("results_count", sa.Integer(), nullable=False),
        sa.Column("entity_type", sa.String(length=32), nullable=True),
        sa.Column(
            "searched_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_search_analytics_query", "search_analytics", ["query"])
    op.create_index(
        "ix_search_analytics_searched_at", "search_analytics", ["searched_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_search_analytics_searched_at", table_name="search_analytics")
    op.drop_index("ix_search_analytics_query", table_name="search_analytics")
    op.drop_table("search_analytics")

    op.execute("DROP INDEX IF EXISTS ix_search_index_document_vector")
    op.drop_index("idx_search_entity_type", table_name="search_index")
    op.drop_table("search_index")
