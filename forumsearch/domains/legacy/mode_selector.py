"""
Mode Selector - Picks the textual match mode for a legacy search.
"""

from __future__ import annotations

import logging

from .models import ModeConfig, SearchMode

logger = logging.getLogger(__name__)

__all__ = ["ModeSelector"]

# The only storage engine with native full-text match support
FULLTEXT_ENGINE = "myisam"

# Full-text engines skip tokens this short; substring search still finds them
SHORT_QUERY_LENGTH = 4


class ModeSelector:
    """
    Decides between match, boolean and like.

    Example:
        >>> ModeSelector().select("hello world")
        <SearchMode.MATCH: 'match'>
    """

    def __init__(self, config: ModeConfig | None = None) -> None:
        self._config = config or ModeConfig()

    def select(self, text: str, forced_mode: str | SearchMode | None = "") -> SearchMode:
        """
        Select the match mode.

        A forced mode replaces the configured default; the storage engine
        and short-query rules still apply afterwards.

        Args:
            text: Search text
            forced_mode: Explicit override, empty for none

        Returns:
            MATCH, BOOLEAN or LIKE

        Raises:
            SearchError: Unknown forced mode
        """
        if forced_mode:
            mode = SearchMode.parse(forced_mode)
        else:
            mode = self._config.default_mode

        if mode is SearchMode.MATCH_BOOLEAN:
            mode = SearchMode.BOOLEAN if "+" in text or "-" in text else SearchMode.MATCH

        engine = self._config.storage_engine_override
        if engine and engine.lower() != FULLTEXT_ENGINE:
            mode = SearchMode.LIKE

        if len(text.strip()) <= SHORT_QUERY_LENGTH:
            mode = SearchMode.LIKE

        logger.debug("Search mode for %r: %s", text[:50], mode.value)
        return mode
