"""
Tests for legacy search mode selection.
"""

from __future__ import annotations

import pytest

from forumsearch.config import SearchError, Settings

from .mode_selector import ModeSelector
from .models import ModeConfig, SearchMode


def test_short_text_uses_like() -> None:
    """Test text of four characters or fewer falls back to substring search."""
    selector = ModeSelector()
    assert selector.select("foo") is SearchMode.LIKE
    assert selector.select("  door  ") is SearchMode.LIKE


def test_plain_text_uses_match() -> None:
    """Test matchboolean without operators picks natural-language match."""
    assert ModeSelector().select("hello world") is SearchMode.MATCH


def test_operators_use_boolean() -> None:
    """Test + or - switches matchboolean to boolean mode."""
    selector = ModeSelector()
    assert selector.select("+hello -world") is SearchMode.BOOLEAN
    assert selector.select("door-sensor") is SearchMode.BOOLEAN


def test_forced_mode_wins() -> None:
    """Test an explicit mode overrides the configured default."""
    selector = ModeSelector()
    assert selector.select("hello world", forced_mode="like") is SearchMode.LIKE
    assert selector.select("+hello -world", forced_mode="like") is SearchMode.LIKE
    assert selector.select("hello world", forced_mode=SearchMode.BOOLEAN) is SearchMode.BOOLEAN


def test_forced_mode_still_short_query_like() -> None:
    """Test the short-query rule applies after a forced mode."""
    assert ModeSelector().select("foo", forced_mode="match") is SearchMode.LIKE


def test_configured_default_mode() -> None:
    """Test a non-matchboolean default is used as-is."""
    selector = ModeSelector(ModeConfig(default_mode=SearchMode.MATCH))
    assert selector.select("+hello -world") is SearchMode.MATCH


def test_storage_engine_override_forces_like() -> None:
    """Test engines without full-text match force substring search."""
    selector = ModeSelector(ModeConfig(storage_engine_override="InnoDB"))
    assert selector.select("hello world") is SearchMode.LIKE


def test_fulltext_engine_override_keeps_match() -> None:
    """Test the full-text capable engine does not force like."""
    selector = ModeSelector(ModeConfig(storage_engine_override="MyISAM"))
    assert selector.select("hello world") is SearchMode.MATCH


def test_unknown_forced_mode() -> None:
    """Test unknown mode names are rejected."""
    with pytest.raises(SearchError):
        ModeSelector().select("hello world", forced_mode="fuzzy")


def test_mode_config_from_settings() -> None:
    """Test ModeConfig reads the search mode and engine override."""
    settings = Settings(search_mode="Boolean", storage_engine_override="sqlite")
    config = ModeConfig.from_settings(settings)

    assert config.default_mode is SearchMode.BOOLEAN
    assert config.storage_engine_override == "sqlite"


def test_mode_config_rejects_unknown_mode() -> None:
    """Test invalid configured modes fail fast."""
    with pytest.raises(SearchError):
        ModeConfig.from_settings(Settings(search_mode="fuzzy"))
