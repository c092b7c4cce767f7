"""
SQLite Adapter - Relational store for legacy search.
"""

from .repository import SQLiteRepository

__all__ = ["SQLiteRepository"]
