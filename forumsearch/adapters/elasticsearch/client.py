"""
Elasticsearch Client - Sends boosted queries to the forum search index.

Features:
- Async HTTP client
- Ordered host failover on transport errors
- Explicit request timeout
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from forumsearch.config import ErrorCode, SearchBackendError
from forumsearch.domains.search.models import BoostedQueryDocument, SearchHit

logger = logging.getLogger(__name__)

__all__ = ["ElasticsearchClient"]


class ElasticsearchClient:
    """
    Client for an Elasticsearch-compatible `_search` endpoint.

    Example:
        >>> client = ElasticsearchClient(["http://localhost:9200"])
        >>> hits = await client.execute("forum_index_v7", build_query("door"))
    """

    def __init__(
        self,
        hosts: list[str],
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            hosts: Base URLs tried in order
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        if not hosts:
            raise ValueError("At least one search host is required")
        self.hosts = [host.rstrip("/") for host in hosts]
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def execute(
        self,
        index_name: str,
        query: BoostedQueryDocument,
    ) -> list[SearchHit]:
        """
        Run a query against the index.

        Args:
            index_name: Index to search
            query: Query document

        Returns:
            Hits in backend rank order

        Raises:
            SearchBackendError: No host reachable, the query was rejected,
                or the response could not be parsed
        """
        client = await self._get_client()
        body = query.to_body()
        failures: list[str] = []

        for host in self.hosts:
            url = f"{host}/{index_name}/_search"
            try:
                response = await client.post(url, json=body)
            except httpx.TransportError as e:
                logger.warning("Search host %s failed: %s", host, e)
                failures.append(f"{host}: {e.__class__.__name__}")
                continue

            if response.status_code >= 400:
                raise SearchBackendError(
                    f"Search index rejected query: {response.status_code}",
                    {"host": host, "status": response.status_code, "reason": response.text[:500]},
                    code=ErrorCode.SEARCH_BACKEND_REJECTED,
                )

            try:
                return self._parse_hits(response.json())
            except (ValueError, ValidationError) as e:
                raise SearchBackendError(
                    "Search index returned an unreadable response",
                    {"host": host, "reason": str(e)[:500]},
                    code=ErrorCode.SEARCH_BACKEND_REJECTED,
                ) from e

        raise SearchBackendError(
            "No search host reachable",
            {"hosts": self.hosts, "failures": failures},
        )

    @staticmethod
    def _parse_hits(data: dict[str, Any]) -> list[SearchHit]:
        """Parse `hits.hits[]` from a search response."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        raw_hits = (data.get("hits") or {}).get("hits") or []
        return [SearchHit.from_raw(hit) for hit in raw_hits]

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
