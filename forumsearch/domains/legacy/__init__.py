"""
Legacy Search Domain - Relational fallback search.

This domain handles:
- Match mode selection (natural language, boolean, substring)
- Per-content-type match clause accumulation
- Unioned statement building with bound placeholders
- Row normalization into the shared result shape
"""

from .contracts import ClauseContributor
from .contributors import CommentClauseContributor, DiscussionClauseContributor
from .mode_selector import ModeSelector
from .models import ClauseSource, LegacyMatchClause, ModeConfig, SearchMode, SearchStatement
from .sql_search import LegacySqlSearchModel

__all__ = [
    "ClauseContributor",
    "ClauseSource",
    "CommentClauseContributor",
    "DiscussionClauseContributor",
    "LegacyMatchClause",
    "LegacySqlSearchModel",
    "ModeConfig",
    "ModeSelector",
    "SearchMode",
    "SearchStatement",
]
