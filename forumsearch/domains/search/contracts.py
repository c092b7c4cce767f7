"""
Search Contracts - Interfaces for search domain.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .models import BoostedQueryDocument, NormalizedResult, SearchHit


@runtime_checkable
class SearchEngine(Protocol):
    """Contract shared by the index-backed and relational search paths."""

    async def search(
        self,
        text: str,
        offset: int = 0,
        limit: int = 20,
    ) -> list[NormalizedResult]:
        """Execute search and return normalized results in rank order."""
        ...


@runtime_checkable
class IndexBackend(Protocol):
    """Contract for full-text index clients."""

    async def execute(
        self,
        index_name: str,
        query: BoostedQueryDocument,
    ) -> list[SearchHit]:
        """Run the query and return ranked hits. Raises SearchBackendError."""
        ...


@runtime_checkable
class RelationalBackend(Protocol):
    """Contract for relational stores used by the legacy search path."""

    async def query(
        self,
        sql: str,
        parameters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Execute a statement with named parameters. Raises SearchBackendError."""
        ...
