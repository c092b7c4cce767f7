"""
Search Domain - Index-backed forum search.

This domain handles:
- Phrase extraction and boosted query construction
- Recency and editorial-flag score boosting
- Collapsing hits per discussion
- Normalizing hits into the shared result shape
"""

from .contracts import IndexBackend, RelationalBackend, SearchEngine
from .index_search import IndexSearch
from .models import (
    BOOST_FUNCTIONS,
    BoostedQueryDocument,
    BoostFunction,
    HighlightConfig,
    NormalizedResult,
    SearchHit,
)
from .normalizer import ResultNormalizer
from .query_builder import QueryBuilder, build_query, extract_phrases

__all__ = [
    "SearchEngine",
    "IndexBackend",
    "RelationalBackend",
    "BOOST_FUNCTIONS",
    "BoostFunction",
    "BoostedQueryDocument",
    "HighlightConfig",
    "SearchHit",
    "NormalizedResult",
    "QueryBuilder",
    "build_query",
    "extract_phrases",
    "ResultNormalizer",
    "IndexSearch",
]
