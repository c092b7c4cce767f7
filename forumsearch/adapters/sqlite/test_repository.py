"""Tests for SQLite Repository."""

from datetime import datetime
from pathlib import Path

import pytest

from forumsearch.config import ErrorCode, SearchBackendError, Settings
from forumsearch.deps import create_legacy_search
from forumsearch.domains.legacy import SearchMode

from .repository import SQLiteRepository


@pytest.fixture
async def repo(tmp_path: Path):
    """Create a test repository with temporary database."""
    db_path = tmp_path / "test.db"
    repo = SQLiteRepository(db_path)
    await repo.initialize()
    yield repo
    await repo.close()


@pytest.fixture
async def seeded_repo(repo: SQLiteRepository):
    """Repository with two discussions and one comment."""
    door = await repo.insert_discussion(
        name="Door sensor fault",
        body="The door sensor keeps failing.\n\nAny ideas?",
        date_inserted=datetime(2024, 1, 1, 10, 0),
        user_id=1,
        category_id=3,
        fmt="Text",
    )
    await repo.insert_discussion(
        name="Motor overload",
        body="Overload trips after an hour.",
        date_inserted=datetime(2024, 1, 5, 10, 0),
        user_id=2,
        category_id=3,
    )
    await repo.insert_comment(
        discussion_id=door,
        body="<p>Clean the door sensor weekly.</p>",
        date_inserted=datetime(2024, 2, 1, 10, 0),
        user_id=4,
    )
    return repo


def _settings() -> Settings:
    return Settings(
        storage_engine_override="sqlite",
        site_url="https://forum.example.com",
        db_table_prefix="GDN_",
    )


async def test_initialize_creates_tables(repo: SQLiteRepository):
    """Test that initialize creates the discussion and comment tables."""
    rows = await repo.query("SELECT name FROM sqlite_master WHERE type='table'", {})
    tables = {row["name"] for row in rows}

    assert "GDN_Discussion" in tables
    assert "GDN_Comment" in tables


async def test_query_named_parameters(seeded_repo: SQLiteRepository):
    """Test placeholders are bound with or without the leading colon."""
    rows = await seeded_repo.query(
        "SELECT Name FROM GDN_Discussion WHERE Name like :Search0 OR Body like :Search1",
        {":Search0": "%motor%", "Search1": "%nothing%"},
    )
    assert [row["Name"] for row in rows] == ["Motor overload"]


async def test_query_error_is_backend_error(repo: SQLiteRepository):
    """Test invalid SQL is reported as SearchBackendError."""
    with pytest.raises(SearchBackendError) as exc_info:
        await repo.query("SELECT * FROM missing_table", {})
    assert exc_info.value.code == ErrorCode.STORAGE_READ_FAILED


async def test_legacy_search_end_to_end(seeded_repo: SQLiteRepository):
    """Test the legacy search model runs its unioned statement on SQLite."""
    model = create_legacy_search(_settings(), repository=seeded_repo)

    results = await model.search("door sensor")

    assert model.search_mode is SearchMode.LIKE
    assert [r.record_type for r in results] == ["Comment", "Discussion"]

    comment, discussion = results
    assert comment.title == "Door sensor fault"
    assert comment.url == "https://forum.example.com/discussion/comment/1/#Comment_1"
    assert comment.summary == "<p>Clean the door sensor weekly.</p>"
    assert comment.user_id == 4

    assert discussion.url == "https://forum.example.com/discussion/1"
    assert discussion.summary == "The door sensor keeps failing.<br />Any ideas?"
    assert discussion.date_inserted == datetime(2024, 1, 1, 10, 0)
    assert discussion.category_id == 3


async def test_legacy_search_default_settings(seeded_repo: SQLiteRepository):
    """Test default settings search SQLite in like mode, even for long queries."""
    for settings in (Settings(), Settings(storage_engine_override="MyISAM")):
        model = create_legacy_search(settings, repository=seeded_repo)

        results = await model.search("door sensor")

        assert model.search_mode is SearchMode.LIKE
        assert [r.record_type for r in results] == ["Comment", "Discussion"]


async def test_legacy_search_pagination(seeded_repo: SQLiteRepository):
    """Test offset and limit apply to the unioned results."""
    model = create_legacy_search(_settings(), repository=seeded_repo)

    first = await model.search("door sensor", offset=0, limit=1)
    second = await model.search("door sensor", offset=1, limit=1)

    assert [r.record_type for r in first] == ["Comment"]
    assert [r.record_type for r in second] == ["Discussion"]


async def test_legacy_search_no_match(seeded_repo: SQLiteRepository):
    """Test unmatched text returns an empty list."""
    model = create_legacy_search(_settings(), repository=seeded_repo)
    assert await model.search("escalator") == []
