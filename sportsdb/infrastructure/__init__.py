"""Infrastructure: PostgreSQL persistence and Redis cache."""
