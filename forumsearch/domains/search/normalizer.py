"""
Result Normalizer - Maps index hits onto NormalizedResult records.
"""

from __future__ import annotations

from .models import NormalizedResult, SearchHit
from .urls import THREAD_PREFIX, comment_url, discussion_url, is_thread_identifier

__all__ = ["ResultNormalizer", "SUMMARY_SEPARATOR"]

SUMMARY_SEPARATOR = "..."


def _as_int(value: str) -> int | None:
    return int(value) if value.isdigit() else None


class ResultNormalizer:
    """
    Converts raw hits into output records, keeping backend rank order.

    Example:
        >>> normalizer = ResultNormalizer(site_url="https://forum.example.com")
        >>> results = normalizer.normalize(hits)
    """

    def __init__(self, site_url: str = "") -> None:
        self._site_url = site_url

    def url_for(self, identifier: str) -> str:
        """Thread URL for "D_<n>" identifiers, anchored reply URL otherwise."""
        if is_thread_identifier(identifier):
            return discussion_url(identifier[len(THREAD_PREFIX):], self._site_url)
        return comment_url(identifier, self._site_url)

    def normalize_hit(self, hit: SearchHit) -> NormalizedResult:
        """Normalize a single hit."""
        if is_thread_identifier(hit.identifier):
            record_type = "Discussion"
            primary_id = _as_int(hit.identifier[len(THREAD_PREFIX):])
        else:
            record_type = "Comment"
            primary_id = _as_int(hit.identifier)

        return NormalizedResult(
            title=hit.title,
            summary=SUMMARY_SEPARATOR.join(hit.highlights),
            url=self.url_for(hit.identifier),
            date_inserted=hit.date,
            user_id=hit.user_id,
            primary_id=primary_id,
            record_type=record_type,
            format="Html",
        )

    def normalize(self, hits: list[SearchHit]) -> list[NormalizedResult]:
        """Normalize hits in the order given."""
        return [self.normalize_hit(hit) for hit in hits]
