"""Tests for configuration management module.

Tests cover:
- Settings defaults
- Environment variable overrides
- Field validators (log_level, log_format, page_size)
- Settings caching (lru_cache)
"""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from vitrine_common.config import Settings, get_settings

pytestmark = pytest.mark.unit

ENV_VARS = [
    "VITRINE_LOG_LEVEL",
    "VITRINE_LOG_FORMAT",
    "VITRINE_FIRST_PARTY_MANIFEST",
    "VITRINE_FETCH_TIMEOUT",
    "VITRINE_MANIFEST_QUERY_PARAM",
    "VITRINE_PAGE_SIZE",
]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Provide an environment without vitrine config vars."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
        monkeypatch.delenv(var.lower(), raising=False)


@pytest.fixture
def clear_settings_cache():
    """Clear the settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Defaults and overrides
# =============================================================================


class TestSettingsDefaults:
    """Test Settings has correct default values."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.first_party_manifest is None
        assert settings.fetch_timeout == 10.0
        assert settings.manifest_query_param == "manifest"
        assert settings.page_size == 12


class TestEnvironmentOverrides:
    """Test Settings can be overridden via environment variables."""

    def test_first_party_manifest_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("VITRINE_FIRST_PARTY_MANIFEST", "/srv/catalog.json")

        assert Settings(_env_file=None).first_party_manifest == "/srv/catalog.json"

    def test_fetch_timeout_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("VITRINE_FETCH_TIMEOUT", "2.5")

        assert Settings(_env_file=None).fetch_timeout == 2.5

    def test_page_size_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("VITRINE_PAGE_SIZE", "24")

        assert Settings(_env_file=None).page_size == 24

    def test_case_insensitive_env_vars(self, clean_env, monkeypatch):
        monkeypatch.setenv("vitrine_log_format", "json")

        assert Settings(_env_file=None).log_format == "json"

    def test_unprefixed_vars_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings(_env_file=None).log_level == "INFO"


# =============================================================================
# Validators
# =============================================================================


class TestValidators:
    """Test field validators."""

    @pytest.mark.parametrize("value,expected", [("debug", "DEBUG"), ("Warning", "WARNING")])
    def test_log_level_normalized(self, clean_env, value, expected):
        assert Settings(_env_file=None, log_level=value).log_level == expected

    def test_log_level_invalid_raises(self, clean_env):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, log_level="TRACE")

        assert any("log_level" in str(e) for e in exc_info.value.errors())

    def test_log_format_normalized(self, clean_env):
        assert Settings(_env_file=None, log_format="JSON").log_format == "json"

    def test_log_format_invalid_raises(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    @pytest.mark.parametrize("field", ["page_size", "fetch_timeout"])
    def test_non_positive_rejected(self, clean_env, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})


class TestSettingsCache:
    """Test get_settings caching."""

    def test_returns_same_instance(self, clean_env, clear_settings_cache):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, clean_env, clear_settings_cache, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("VITRINE_PAGE_SIZE", "3")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().page_size == 3
        assert os.environ["VITRINE_PAGE_SIZE"] == "3"
