"""
Legacy SQL Search - Relational fallback for forum search.

Each content type contributes one match clause; the clauses are unioned,
ordered newest first and executed as a single statement. Match mode,
clauses and placeholders are per-instance accumulator state, cleared by
reset() before every execution.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from forumsearch.config import SearchError, SearchStateError
from forumsearch.domains.search.models import NormalizedResult
from forumsearch.domains.search.urls import comment_url, discussion_url

from .formatting import condense, to_html
from .mode_selector import ModeSelector
from .models import ClauseSource, LegacyMatchClause, SearchMode, SearchStatement

if TYPE_CHECKING:
    from forumsearch.domains.search.contracts import RelationalBackend

    from .contracts import ClauseContributor

logger = logging.getLogger(__name__)

__all__ = ["LegacySqlSearchModel", "translate_row"]

PLACEHOLDER_PATTERN = re.compile(r":Search\d+\b")

# Row field -> record field, per record type
RECORD_TRANSLATIONS: dict[str, dict[str, str]] = {
    "Discussion": {"PrimaryID": "DiscussionID", "Title": "Name", "CategoryID": "CategoryID"},
    "Comment": {"PrimaryID": "CommentID", "Title": "DiscussionName", "CategoryID": "CategoryID"},
}


def translate_row(row: Mapping[str, Any], mapping: Mapping[str, str]) -> dict[str, Any]:
    """Rename the fields of a row that appear in `mapping`, dropping the rest."""
    return {target: row[field] for field, target in mapping.items() if field in row}


class LegacySqlSearchModel:
    """
    Relational search model.

    Not safe to share between concurrent searches.

    Example:
        >>> model = LegacySqlSearchModel(repo, contributors=[DiscussionClauseContributor()])
        >>> results = await model.search("door sensor")
    """

    def __init__(
        self,
        backend: RelationalBackend,
        mode_selector: ModeSelector | None = None,
        contributors: Iterable[ClauseContributor] = (),
        site_url: str = "",
        force_search_mode: str = "",
    ) -> None:
        """
        Initialize search model.

        Args:
            backend: Relational store that executes the statement
            mode_selector: Mode selection (default configuration if omitted)
            contributors: Content types that add clauses on every search
            site_url: Prefix for derived URLs
            force_search_mode: Mode override for every search, empty for none
        """
        self._backend = backend
        self._selector = mode_selector or ModeSelector()
        self._contributors = list(contributors)
        self._site_url = site_url
        self.force_search_mode = force_search_mode

        self._mode = SearchMode.MATCH
        self._clauses: list[LegacyMatchClause] = []
        self._parameters: list[str] = []

    @property
    def search_mode(self) -> SearchMode:
        return self._mode

    @search_mode.setter
    def search_mode(self, value: str | SearchMode) -> None:
        self._mode = SearchMode.parse(value)

    @property
    def clauses(self) -> tuple[LegacyMatchClause, ...]:
        return tuple(self._clauses)

    @property
    def parameters(self) -> tuple[str, ...]:
        """Placeholders generated since the last reset."""
        return tuple(self._parameters)

    def parameter(self) -> str:
        """Allocate the next placeholder name."""
        name = f":Search{len(self._parameters)}"
        self._parameters.append(name)
        return name

    def reset(self) -> None:
        """Clear accumulated clauses and placeholders."""
        self._parameters = []
        self._clauses = []

    def add_search(self, clause: LegacyMatchClause) -> None:
        """Add a prebuilt clause. Its placeholders must come from parameter()."""
        self._clauses.append(clause)

    def add_match_clause(
        self,
        source: ClauseSource,
        columns: Sequence[str] | str,
        relevance_column: str = "",
    ) -> LegacyMatchClause:
        """
        Add a match clause for the current mode.

        Args:
            source: Table and output columns of the content type
            columns: Columns to match (list or comma-separated string)
            relevance_column: Relevance expression for like mode, constant 1 if empty

        Returns:
            The clause that was added
        """
        if isinstance(columns, str):
            columns = columns.split(",")
        columns = [column.strip() for column in columns if column.strip()]
        if not columns:
            raise SearchError("Match clause needs at least one column", {"table": source.table})

        if self._mode is SearchMode.LIKE:
            relevance = relevance_column or "1"
            placeholders = tuple(self.parameter() for _ in columns)
            predicate = " or ".join(
                f"{column} like {placeholder}" for column, placeholder in zip(columns, placeholders)
            )
        else:
            modifier = " in boolean mode" if self._mode is SearchMode.BOOLEAN else ""
            column_list = ", ".join(columns)
            placeholders = (self.parameter(), self.parameter())
            relevance = f"match({column_list}) against({placeholders[0]}{modifier})"
            predicate = f"match({column_list}) against ({placeholders[1]}{modifier})"

        clause = LegacyMatchClause(
            source=source,
            relevance=relevance,
            predicate=predicate,
            placeholders=placeholders,
        )
        self._clauses.append(clause)
        return clause

    def build_statement(self, text: str, offset: int = 0, limit: int = 20) -> SearchStatement:
        """
        Union the accumulated clauses and bind every placeholder.

        Raises:
            SearchError: Invalid pagination
            SearchStateError: No clauses, or placeholders and bindings disagree
        """
        if offset < 0 or limit <= 0:
            raise SearchError("Invalid pagination", {"offset": offset, "limit": limit})
        if not self._clauses:
            raise SearchStateError("No match clauses registered")

        union = "\nunion all\n".join(clause.to_sql() for clause in self._clauses)
        sql = (
            f"select s.*\nfrom (\n{union}\n) s\n"
            f"order by s.DateInserted desc\n"
            f"limit {int(limit)} offset {int(offset)}"
        )

        value = f"%{text}%" if self._mode is SearchMode.LIKE else text
        parameters = {name: value for name in self._parameters}

        used = set(PLACEHOLDER_PATTERN.findall(sql))
        if used != set(parameters):
            raise SearchStateError(
                "Placeholders do not match bound parameters",
                {
                    "unbound": sorted(used - set(parameters)),
                    "unused": sorted(set(parameters) - used),
                },
            )

        logger.debug(
            "Built %s statement: %d clauses, %d parameters",
            self._mode.value,
            len(self._clauses),
            len(parameters),
        )
        return SearchStatement(sql=sql, parameters=parameters)

    async def search(
        self,
        text: str,
        offset: int = 0,
        limit: int = 20,
    ) -> list[NormalizedResult]:
        """
        Execute search.

        Args:
            text: Search text
            offset: Pagination offset
            limit: Page size

        Returns:
            Normalized results, newest first

        Raises:
            SearchBackendError: Database unreachable or statement rejected
        """
        text = text.strip()
        if not text:
            return []

        self._mode = self._selector.select(text, self.force_search_mode)

        try:
            for contributor in self._contributors:
                contributor.register(self, text)

            if not self._clauses:
                logger.debug("No match clauses registered, skipping query")
                return []

            statement = self.build_statement(text, offset=offset, limit=limit)
        finally:
            self.reset()

        rows = await self._backend.query(statement.sql, statement.parameters)
        results = [self.normalize_row(row) for row in rows]

        logger.info(
            "Legacy search: query='%s' mode=%s -> %d results",
            text[:50],
            self._mode.value,
            len(results),
        )
        return results

    def normalize_row(self, row: Mapping[str, Any]) -> NormalizedResult:
        """Format the summary and derive the URL of a result row."""
        summary = row.get("Summary")
        fmt = row.get("Format")
        if summary is not None:
            summary = condense(to_html(summary, fmt))
            fmt = "Html"

        record_type = row.get("RecordType")
        return NormalizedResult(
            title=row.get("Title") or "",
            summary=summary or "",
            url=self._url_for(record_type, row),
            date_inserted=row.get("DateInserted"),
            user_id=row.get("UserID"),
            primary_id=row.get("PrimaryID"),
            record_type=record_type,
            format=fmt,
            category_id=row.get("CategoryID"),
        )

    def _url_for(self, record_type: str | None, row: Mapping[str, Any]) -> str:
        if record_type in RECORD_TRANSLATIONS:
            record = translate_row(row, RECORD_TRANSLATIONS[record_type])
            if record_type == "Discussion" and "DiscussionID" in record:
                return discussion_url(record["DiscussionID"], self._site_url)
            if record_type == "Comment" and "CommentID" in record:
                return comment_url(record["CommentID"], self._site_url)
        return row.get("Url") or ""
