"""
Index Search - Search path backed by the full-text index.

Builds a boosted query, runs it against the index backend and normalizes
the ranked hits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import NormalizedResult
from .normalizer import ResultNormalizer
from .query_builder import QueryBuilder

if TYPE_CHECKING:
    from .contracts import IndexBackend

logger = logging.getLogger(__name__)

__all__ = ["IndexSearch"]


class IndexSearch:
    """
    Index-backed search.

    Example:
        >>> search = IndexSearch(ElasticsearchClient(hosts), "forum_index_v7")
        >>> results = await search.search('"door sensor" fault')
    """

    def __init__(
        self,
        backend: IndexBackend,
        index_name: str,
        builder: QueryBuilder | None = None,
        normalizer: ResultNormalizer | None = None,
    ) -> None:
        """
        Initialize index search.

        Args:
            backend: Index client
            index_name: Index to query
            builder: Query builder (default highlight/collapse settings if omitted)
            normalizer: Result normalizer (relative URLs if omitted)
        """
        self._backend = backend
        self._index_name = index_name
        self._builder = builder or QueryBuilder()
        self._normalizer = normalizer or ResultNormalizer()

    async def search(
        self,
        text: str,
        offset: int = 0,
        limit: int = 20,
    ) -> list[NormalizedResult]:
        """
        Execute search.

        Args:
            text: Free-text input, may contain quoted phrases
            offset: Pagination offset
            limit: Page size

        Returns:
            Normalized results in backend rank order

        Raises:
            SearchError: Invalid pagination
            SearchBackendError: Index unreachable or query rejected
        """
        if not text.strip():
            return []

        document = self._builder.build(text, offset=offset, limit=limit)
        hits = await self._backend.execute(self._index_name, document)
        results = self._normalizer.normalize(hits)

        logger.info(
            "Index search: query='%s' -> %d results (from=%d, size=%d)",
            text[:50],
            len(results),
            offset,
            limit,
        )
        return results
