"""
Query Builder - Turns free text into a boosted function-score query.

Quoted phrases become required body phrase matches plus optional title
matches; whatever text is left becomes optional keyword matches against
title and body.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from forumsearch.config import SearchError

from .models import BoostedQueryDocument, HighlightConfig

logger = logging.getLogger(__name__)

__all__ = ["QueryBuilder", "build_query", "extract_phrases"]

PHRASE_PATTERN = re.compile(r'"([^"]+)"')

TITLE_FIELD = "discussionName"
BODY_FIELD = "body"


def extract_phrases(text: str) -> tuple[list[str], str]:
    """
    Split quoted phrases out of free text.

    Args:
        text: Raw search input

    Returns:
        (phrases in order of appearance, remaining text trimmed)

    Example:
        >>> extract_phrases('"phrase one" keyword')
        (['phrase one'], 'keyword')
    """
    phrases: list[str] = []
    remaining = text
    for match in PHRASE_PATTERN.finditer(text):
        phrases.append(match.group(1))
        remaining = remaining.replace(match.group(0), "", 1)
    return phrases, remaining.strip()


class QueryBuilder:
    """
    Builds a new BoostedQueryDocument per call.

    Example:
        >>> builder = QueryBuilder()
        >>> doc = builder.build('"door sensor" fault', offset=0, limit=20)
        >>> doc.to_body()["size"]
        20
    """

    def __init__(
        self,
        highlight: HighlightConfig | None = None,
        collapse_field: str = "discussionId",
    ) -> None:
        self._highlight = highlight or HighlightConfig()
        self._collapse_field = collapse_field

    def build(self, free_text: str, offset: int = 0, limit: int = 20) -> BoostedQueryDocument:
        """
        Build the query document.

        Args:
            free_text: User search input
            offset: Pagination offset (>= 0)
            limit: Page size (> 0)

        Returns:
            Fresh query document

        Raises:
            SearchError: offset or limit out of range
        """
        phrases, keywords = extract_phrases(free_text)

        must: list[dict[str, Any]] = []
        should: list[dict[str, Any]] = []
        for phrase in phrases:
            must.append({"match_phrase": {BODY_FIELD: phrase}})
            should.append({"match": {TITLE_FIELD: phrase}})

        if keywords:
            should.append({"match": {TITLE_FIELD: keywords}})
            should.append({"match": {BODY_FIELD: keywords}})

        try:
            document = BoostedQueryDocument(
                size=limit,
                offset=offset,
                must=tuple(must),
                should=tuple(should),
                highlight=self._highlight,
                collapse_field=self._collapse_field,
            )
        except ValidationError as e:
            raise SearchError(
                "Invalid pagination", {"offset": offset, "limit": limit}
            ) from e

        logger.debug(
            "Built query: %d phrases, keywords=%r, from=%d, size=%d",
            len(phrases),
            keywords[:50],
            offset,
            limit,
        )
        return document


def build_query(free_text: str, offset: int = 0, limit: int = 20) -> BoostedQueryDocument:
    """Build a query document with the default highlight and collapse settings."""
    return QueryBuilder().build(free_text, offset=offset, limit=limit)
