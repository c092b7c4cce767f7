"""
Dependencies - Builds the two search paths from settings.

Backend clients are singletons; legacy search models hold per-search
state and are created fresh for every request.
"""

from __future__ import annotations

from functools import lru_cache

from forumsearch.adapters import ElasticsearchClient, SQLiteRepository
from forumsearch.config import Settings, get_settings
from forumsearch.domains.legacy import (
    CommentClauseContributor,
    DiscussionClauseContributor,
    LegacySqlSearchModel,
    ModeConfig,
    ModeSelector,
)
from forumsearch.domains.search import (
    HighlightConfig,
    IndexSearch,
    QueryBuilder,
    ResultNormalizer,
)

SQLITE_ENGINE = "sqlite"


@lru_cache
def get_index_client() -> ElasticsearchClient:
    """Get search index client singleton."""
    settings = get_settings()
    return ElasticsearchClient(settings.search_hosts, timeout=settings.search_timeout)


@lru_cache
def get_sqlite_repository() -> SQLiteRepository:
    """Get SQLite repository singleton."""
    settings = get_settings()
    return SQLiteRepository(settings.db_path, table_prefix=settings.db_table_prefix)


def create_index_search(
    settings: Settings | None = None,
    client: ElasticsearchClient | None = None,
) -> IndexSearch:
    """Create the index-backed search path."""
    settings = settings or get_settings()
    builder = QueryBuilder(
        highlight=HighlightConfig(
            number_of_fragments=settings.search_highlight_fragments,
            fragment_size=settings.search_fragment_size,
        ),
        collapse_field=settings.search_collapse_field,
    )
    return IndexSearch(
        client or get_index_client(),
        settings.search_index,
        builder=builder,
        normalizer=ResultNormalizer(site_url=settings.site_url),
    )


def create_legacy_search(
    settings: Settings | None = None,
    repository: SQLiteRepository | None = None,
    force_search_mode: str = "",
) -> LegacySqlSearchModel:
    """
    Create a relational search model with the discussion and comment clauses.

    SQLite has no `match ... against`, so a SQLite backend always searches
    in like mode whatever storage engine the settings name.
    """
    settings = settings or get_settings()
    backend = repository or get_sqlite_repository()
    config = ModeConfig.from_settings(settings)
    if isinstance(backend, SQLiteRepository):
        config = config.model_copy(update={"storage_engine_override": SQLITE_ENGINE})

    return LegacySqlSearchModel(
        backend,
        mode_selector=ModeSelector(config),
        contributors=[
            DiscussionClauseContributor(settings.db_table_prefix),
            CommentClauseContributor(settings.db_table_prefix),
        ],
        site_url=settings.site_url,
        force_search_mode=force_search_mode,
    )


async def init_services() -> None:
    """Initialize backends on startup."""
    repo = get_sqlite_repository()
    await repo.initialize()


async def cleanup_services() -> None:
    """Close backends on shutdown."""
    await get_index_client().close()
    await get_sqlite_repository().close()
