"""
Error Taxonomy - Consistent error codes across the search engine.

Usage:
    from forumsearch.config.errors import ErrorCode, ForumSearchError

    raise ForumSearchError(ErrorCode.SEARCH_INVALID_QUERY, "limit must be positive")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Search errors
    SEARCH_INVALID_QUERY = "SEARCH_INVALID_QUERY"
    SEARCH_BACKEND_UNAVAILABLE = "SEARCH_BACKEND_UNAVAILABLE"
    SEARCH_BACKEND_REJECTED = "SEARCH_BACKEND_REJECTED"
    SEARCH_STATE_INVALID = "SEARCH_STATE_INVALID"

    # Storage errors
    STORAGE_CONNECTION_FAILED = "STORAGE_CONNECTION_FAILED"
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ForumSearchError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


# Domain-specific exceptions for cleaner imports
class SearchError(ForumSearchError):
    """Invalid search input or configuration."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SEARCH_INVALID_QUERY, message, details)


class SearchBackendError(ForumSearchError):
    """Search index or database unreachable, or the query was rejected.

    Propagated to the caller as-is; nothing in the search core retries.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.SEARCH_BACKEND_UNAVAILABLE,
    ) -> None:
        super().__init__(code, message, details)


class SearchStateError(ForumSearchError):
    """Malformed accumulator state, e.g. an unbound SQL placeholder.

    Signals a programming defect rather than a recoverable condition.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SEARCH_STATE_INVALID, message, details)
