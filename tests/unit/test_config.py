"""Tests for Settings search tuning validation."""

import pytest
from pydantic import ValidationError

from sportsdb.core.config import Settings, get_settings


class TestSearchSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.search_relevance_weight == 100.0
        assert s.search_default_limit == 10
        assert s.search_max_limit == 50
        assert s.search_candidate_pool_size == 50
        assert s.search_trending_window_hours == 24
        assert s.search_rate_limit == "60/minute"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_RELEVANCE_WEIGHT", "25")
        s = Settings(_env_file=None)
        assert s.search_relevance_weight == 25.0

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError, match="SEARCH_RELEVANCE_WEIGHT"):
            Settings(_env_file=None, search_relevance_weight=-1)

    def test_zero_weight_allowed(self) -> None:
        assert Settings(_env_file=None, search_relevance_weight=0).search_relevance_weight == 0

    def test_non_positive_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search_default_limit=0)

    def test_default_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            Settings(_env_file=None, search_default_limit=60, search_max_limit=50)

    def test_non_positive_pool_rejected(self) -> None:
        with pytest.raises(ValidationError, match="CANDIDATE_POOL"):
            Settings(_env_file=None, search_candidate_pool_size=0)

    def test_non_positive_window_rejected(self) -> None:
        with pytest.raises(ValidationError, match="TRENDING_WINDOW"):
            Settings(_env_file=None, search_trending_window_hours=0)


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
