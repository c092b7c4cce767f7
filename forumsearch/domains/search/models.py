"""
Search Models - Data types for search domain.
"""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BoostFunction(BaseModel):
    """A (filter, weight) pair added to the base relevance score."""

    filter: dict[str, Any]
    weight: int

    model_config = {"frozen": True}


# Editorial flag first, then disjoint recency bands (newest first).
BOOST_FUNCTIONS: tuple[BoostFunction, ...] = (
    BoostFunction(filter={"term": {"highlighted": True}}, weight=15),
    BoostFunction(filter={"range": {"date": {"gte": "now-3M"}}}, weight=10),
    BoostFunction(filter={"range": {"date": {"gte": "now-1y", "lt": "now-3M"}}}, weight=8),
    BoostFunction(filter={"range": {"date": {"gte": "now-3y", "lt": "now-1y"}}}, weight=7),
    BoostFunction(filter={"range": {"date": {"gte": "now-5y", "lt": "now-3y"}}}, weight=5),
)


class HighlightConfig(BaseModel):
    """Body highlighting returned with each hit."""

    pre_tag: str = "<strong>"
    post_tag: str = "</strong>"
    number_of_fragments: int = Field(default=2, ge=0)
    fragment_size: int = Field(default=100, ge=1)

    model_config = {"frozen": True}


class BoostedQueryDocument(BaseModel):
    """
    Function-score query sent to the search index.

    Function weights and the text relevance score are summed
    (score_mode and boost_mode are both "sum").
    """

    size: int = Field(default=20, gt=0)
    offset: int = Field(default=0, ge=0)
    must: tuple[dict[str, Any], ...] = ()
    should: tuple[dict[str, Any], ...] = ()
    functions: tuple[BoostFunction, ...] = BOOST_FUNCTIONS
    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    collapse_field: str = "discussionId"

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """True when the document carries no text clauses."""
        return not self.must and not self.should

    def to_body(self) -> dict[str, Any]:
        """Render the wire document. Every call returns fresh containers."""
        return {
            "size": self.size,
            "from": self.offset,
            "highlight": {
                "fields": {
                    "body": {
                        "pre_tags": [self.highlight.pre_tag],
                        "post_tags": [self.highlight.post_tag],
                        "number_of_fragments": self.highlight.number_of_fragments,
                        "fragment_size": self.highlight.fragment_size,
                    }
                }
            },
            "collapse": {"field": self.collapse_field},
            "query": {
                "function_score": {
                    "query": {
                        "bool": {
                            "must": copy.deepcopy(list(self.must)),
                            "should": copy.deepcopy(list(self.should)),
                        }
                    },
                    "functions": [fn.model_dump() for fn in self.functions],
                    "score_mode": "sum",
                    "boost_mode": "sum",
                }
            },
        }


class SearchHit(BaseModel):
    """Single ranked hit returned by the search index."""

    identifier: str = Field(..., min_length=1)
    title: str = ""
    body: str = ""
    discussion_id: int | None = None
    url: str | None = None
    date: datetime | None = None
    user_id: int | None = None
    highlights: list[str] = Field(default_factory=list)
    score: float | None = None

    @classmethod
    def from_raw(cls, hit: dict[str, Any]) -> SearchHit:
        """Build from a raw `hits.hits[]` entry."""
        source = hit.get("_source") or {}
        highlight = hit.get("highlight") or {}
        identifier = source.get("id")
        return cls(
            identifier="" if identifier is None else str(identifier),
            title=source.get("discussionName") or "",
            body=source.get("body") or "",
            discussion_id=source.get("discussionId"),
            url=source.get("url"),
            date=source.get("date"),
            user_id=source.get("user"),
            highlights=highlight.get("body") or [],
            score=hit.get("_score"),
        )


class NormalizedResult(BaseModel):
    """Search result in the shape both backends return."""

    title: str = ""
    summary: str = ""
    url: str
    date_inserted: datetime | None = Field(default=None, alias="dateInserted")
    user_id: int | None = Field(default=None, alias="userID")
    primary_id: int | None = Field(default=None, alias="primaryID")
    record_type: str | None = Field(default=None, alias="recordType")
    format: str | None = None
    category_id: int | None = Field(default=None, alias="categoryID")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camel-case record consumed by views."""
        return self.model_dump(by_alias=True)
