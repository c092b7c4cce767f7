"""
SQLite Repository - Relational store for the legacy search path.

Features:
- Async operations via aiosqlite
- Discussion and comment tables
- Named-parameter statement execution
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

import aiosqlite

from forumsearch.config import ErrorCode, SearchBackendError

logger = logging.getLogger(__name__)

__all__ = ["SQLiteRepository"]


class SQLiteRepository:
    """
    SQLite repository for forum content.

    SQLite has no native full-text match, so searches against it run in
    like mode (configure it as the storage engine override).

    Example:
        >>> repo = SQLiteRepository("data/forum.db")
        >>> await repo.initialize()
        >>> rows = await repo.query(statement.sql, statement.parameters)
    """

    def __init__(self, db_path: str | Path, table_prefix: str = "GDN_") -> None:
        """
        Initialize repository.

        Args:
            db_path: Path to SQLite database file
            table_prefix: Prefix of the Discussion and Comment tables
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.table_prefix = table_prefix
        self._connection: aiosqlite.Connection | None = None

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create database connection."""
        if self._connection is None:
            try:
                self._connection = await aiosqlite.connect(str(self.db_path))
            except sqlite3.Error as e:
                raise SearchBackendError(
                    f"Cannot open database: {e}",
                    {"db_path": str(self.db_path)},
                    code=ErrorCode.STORAGE_CONNECTION_FAILED,
                ) from e
            self._connection.row_factory = aiosqlite.Row
        return self._connection

    async def initialize(self) -> None:
        """Initialize database schema."""
        conn = await self._get_connection()
        prefix = self.table_prefix

        await conn.executescript(f"""
            CREATE TABLE IF NOT EXISTS {prefix}Discussion (
                DiscussionID INTEGER PRIMARY KEY AUTOINCREMENT,
                CategoryID INTEGER,
                Name TEXT NOT NULL,
                Body TEXT NOT NULL,
                Format TEXT DEFAULT 'Html',
                InsertUserID INTEGER,
                DateInserted TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS {prefix}Comment (
                CommentID INTEGER PRIMARY KEY AUTOINCREMENT,
                DiscussionID INTEGER NOT NULL,
                Body TEXT NOT NULL,
                Format TEXT DEFAULT 'Html',
                InsertUserID INTEGER,
                DateInserted TEXT NOT NULL,
                FOREIGN KEY (DiscussionID) REFERENCES {prefix}Discussion(DiscussionID)
            );

            CREATE INDEX IF NOT EXISTS idx_discussion_inserted ON {prefix}Discussion(DateInserted);
            CREATE INDEX IF NOT EXISTS idx_comment_discussion ON {prefix}Comment(DiscussionID);
        """)

        await conn.commit()
        logger.info("Database initialized: %s", self.db_path)

    async def insert_discussion(
        self,
        name: str,
        body: str,
        date_inserted: datetime,
        user_id: int | None = None,
        category_id: int | None = None,
        fmt: str = "Html",
    ) -> int:
        """
        Insert a discussion.

        Returns:
            Discussion ID
        """
        conn = await self._get_connection()

        cursor = await conn.execute(
            f"""
            INSERT INTO {self.table_prefix}Discussion
            (CategoryID, Name, Body, Format, InsertUserID, DateInserted)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (category_id, name, body, fmt, user_id, date_inserted.isoformat()),
        )

        await conn.commit()
        return cursor.lastrowid

    async def insert_comment(
        self,
        discussion_id: int,
        body: str,
        date_inserted: datetime,
        user_id: int | None = None,
        fmt: str = "Html",
    ) -> int:
        """
        Insert a comment.

        Returns:
            Comment ID
        """
        conn = await self._get_connection()

        cursor = await conn.execute(
            f"""
            INSERT INTO {self.table_prefix}Comment
            (DiscussionID, Body, Format, InsertUserID, DateInserted)
            VALUES (?, ?, ?, ?, ?)
            """,
            (discussion_id, body, fmt, user_id, date_inserted.isoformat()),
        )

        await conn.commit()
        return cursor.lastrowid

    async def query(
        self,
        sql: str,
        parameters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Execute a read statement with named parameters.

        Args:
            sql: Statement using ":Name" placeholders
            parameters: Values keyed by placeholder, with or without the colon

        Returns:
            Rows as dictionaries

        Raises:
            SearchBackendError: Statement rejected by SQLite
        """
        conn = await self._get_connection()
        bound = {name.lstrip(":"): value for name, value in parameters.items()}

        try:
            cursor = await conn.execute(sql, bound)
            rows = await cursor.fetchall()
        except sqlite3.Error as e:
            raise SearchBackendError(
                f"Query failed: {e}",
                {"db_path": str(self.db_path)},
                code=ErrorCode.STORAGE_READ_FAILED,
            ) from e

        return [dict(row) for row in rows]

    async def close(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
