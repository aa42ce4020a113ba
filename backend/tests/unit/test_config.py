"""
Unit Tests for Configuration Management

Tests the Settings class, YAML configuration loading and the book catalog.
These tests verify:
- Default value handling
- Environment variable overrides
- YAML configuration parsing
- Catalog fallback on invalid configuration
"""

import os
from unittest.mock import patch

from journey.config import Settings, get_settings, load_yaml_config, settings
from journey.config import catalog as catalog_module
from journey.config.catalog import DEFAULT_BOOKS, get_book_catalog


class TestSettings:
    """Test suite for the Settings Pydantic model."""

    def test_default_values(self) -> None:
        """Settings should have the journey targets as defaults."""
        with patch.dict(os.environ, {}, clear=True):
            test_settings = Settings(_env_file=None)

            assert test_settings.APP_NAME == "SAL Journey"
            assert test_settings.TIMEZONE == "UTC"
            assert test_settings.JOURNAL_WORDS_PER_PAGE == 250
            assert test_settings.JOURNAL_TARGET_PAGES == 200
            assert test_settings.TOTAL_CHALLENGE_TASKS == 25
            assert test_settings.VOCABULARY_TARGET_WORDS == 100
            assert test_settings.REVIEW_INTERVAL_DAYS == 7
            assert test_settings.STREAK_MILESTONES == [7, 30, 100, 365]

    def test_environment_override(self) -> None:
        with patch.dict(
            os.environ,
            {"REVIEW_INTERVAL_DAYS": "3", "TIMEZONE": "Europe/Berlin"},
            clear=True,
        ):
            test_settings = Settings(_env_file=None)

            assert test_settings.REVIEW_INTERVAL_DAYS == 3
            assert test_settings.TIMEZONE == "Europe/Berlin"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
        assert settings is get_settings()


class TestYamlConfig:
    """Test suite for YAML configuration loading."""

    def test_load_default_yaml(self) -> None:
        config = load_yaml_config()

        assert config["redis"]["key_prefix"] == "journey"
        assert len(config["catalog"]["books"]) == 8


class TestBookCatalog:
    """Test suite for the reading catalog."""

    def test_configured_catalog(self) -> None:
        books = get_book_catalog()

        assert [b.id for b in books][:2] == ["book-1", "book-2"]
        assert sum(b.total_chapters for b in books) == 81

    def test_invalid_catalog_falls_back(self) -> None:
        get_book_catalog.cache_clear()
        try:
            with patch.dict(
                catalog_module.yaml_config,
                {"catalog": {"books": [{"title": "No id", "total_chapters": -1}]}},
            ):
                assert get_book_catalog() == DEFAULT_BOOKS
        finally:
            get_book_catalog.cache_clear()

    def test_missing_catalog_uses_defaults(self) -> None:
        get_book_catalog.cache_clear()
        try:
            with patch.dict(catalog_module.yaml_config, {"catalog": {}}):
                assert get_book_catalog() == DEFAULT_BOOKS
        finally:
            get_book_catalog.cache_clear()
