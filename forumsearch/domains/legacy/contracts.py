"""
Legacy Search Contracts - Interfaces for relational search collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .sql_search import LegacySqlSearchModel


@runtime_checkable
class ClauseContributor(Protocol):
    """A content type that adds its match clause to each search."""

    def register(self, model: LegacySqlSearchModel, text: str) -> None:
        """Add clauses to the model. The match mode is already selected."""
        ...
