"""
Clause Contributors - Discussion and comment match clauses.

Both sources select the same aliases in the same order so their clauses
can be unioned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import ClauseSource

if TYPE_CHECKING:
    from .sql_search import LegacySqlSearchModel

__all__ = ["CommentClauseContributor", "DiscussionClauseContributor"]


class DiscussionClauseContributor:
    """Matches discussion titles and bodies."""

    match_columns = ("d.Name", "d.Body")
    relevance_column = "d.DateInserted"

    def __init__(self, table_prefix: str = "GDN_") -> None:
        self.source = ClauseSource(
            table=f"{table_prefix}Discussion d",
            columns={
                "PrimaryID": "d.DiscussionID",
                "Title": "d.Name",
                "Summary": "d.Body",
                "Format": "d.Format",
                "CategoryID": "d.CategoryID",
                "DateInserted": "d.DateInserted",
                "UserID": "d.InsertUserID",
                "RecordType": "'Discussion'",
            },
        )

    def register(self, model: LegacySqlSearchModel, text: str) -> None:
        model.add_match_clause(self.source, self.match_columns, self.relevance_column)


class CommentClauseContributor:
    """Matches comment bodies; titles come from the parent discussion."""

    match_columns = ("c.Body",)
    relevance_column = "c.DateInserted"

    def __init__(self, table_prefix: str = "GDN_") -> None:
        self.source = ClauseSource(
            table=f"{table_prefix}Comment c",
            joins=(f"join {table_prefix}Discussion d on d.DiscussionID = c.DiscussionID",),
            columns={
                "PrimaryID": "c.CommentID",
                "Title": "d.Name",
                "Summary": "c.Body",
                "Format": "c.Format",
                "CategoryID": "d.CategoryID",
                "DateInserted": "c.DateInserted",
                "UserID": "c.InsertUserID",
                "RecordType": "'Comment'",
            },
        )

    def register(self, model: LegacySqlSearchModel, text: str) -> None:
        model.add_match_clause(self.source, self.match_columns, self.relevance_column)
