"""
Legacy Search Models - Data types for the relational search path.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from forumsearch.config import SearchError

if TYPE_CHECKING:
    from forumsearch.config import Settings


class SearchMode(str, Enum):
    """Textual match strategies."""

    MATCH = "match"  # Natural-language full-text ranking
    BOOLEAN = "boolean"  # Full-text with +/- operators
    LIKE = "like"  # Substring (wildcard) match
    MATCH_BOOLEAN = "matchboolean"  # Pick match or boolean from the text

    @classmethod
    def parse(cls, value: str | SearchMode) -> SearchMode:
        """Parse a configured or forced mode name."""
        if isinstance(value, SearchMode):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise SearchError(
                f"Unknown search mode: {value!r}",
                {"allowed": [mode.value for mode in cls]},
            ) from e


class ModeConfig(BaseModel):
    """Configuration consumed by ModeSelector."""

    default_mode: SearchMode = SearchMode.MATCH_BOOLEAN
    storage_engine_override: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> ModeConfig:
        return cls(
            default_mode=SearchMode.parse(settings.search_mode or SearchMode.MATCH_BOOLEAN),
            storage_engine_override=settings.storage_engine_override or None,
        )


class ClauseSource(BaseModel):
    """
    Table and output columns for one content type.

    Every source must select the same aliases in the same order so the
    clauses can be unioned.
    """

    table: str
    columns: dict[str, str]  # alias -> SQL expression
    joins: tuple[str, ...] = ()

    model_config = {"frozen": True}


class LegacyMatchClause(BaseModel):
    """One content type's select with relevance and match predicate."""

    source: ClauseSource
    relevance: str
    predicate: str
    placeholders: tuple[str, ...] = Field(min_length=1)

    model_config = {"frozen": True}

    def to_sql(self) -> str:
        selected = [f"{expression} as {alias}" for alias, expression in self.source.columns.items()]
        selected.append(f"{self.relevance} as Relevance")
        lines = [f"select {', '.join(selected)}", f"from {self.source.table}"]
        lines.extend(self.source.joins)
        lines.append(f"where ({self.predicate})")
        return "\n".join(lines)


class SearchStatement(BaseModel):
    """SQL with every placeholder already bound."""

    sql: str
    parameters: dict[str, str]

    model_config = {"frozen": True}
