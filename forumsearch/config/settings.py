"""
Settings - Search configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Search index (Elasticsearch-compatible _search endpoint)
    search_hosts: list[str] = ["http://localhost:9200"]
    search_index: str = "forum_index_v7"
    search_timeout: float = 10.0
    search_default_limit: int = 20
    search_highlight_fragments: int = 2
    search_fragment_size: int = 100
    search_collapse_field: str = "discussionId"

    # Legacy relational search
    # "matchboolean", "match", "boolean" or "like"
    search_mode: str = "matchboolean"
    # Anything but "myisam" disables native full-text matching.
    # A SQLite backend always searches in like mode.
    storage_engine_override: str | None = None
    db_path: Path = Path("data/forum.db")
    db_table_prefix: str = "GDN_"

    # Prepended to derived discussion/comment URLs
    site_url: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
