"""
Configuration - Search settings and error taxonomy.
"""

from .errors import (
    ErrorCode,
    ForumSearchError,
    SearchBackendError,
    SearchError,
    SearchStateError,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "ForumSearchError",
    "SearchError",
    "SearchBackendError",
    "SearchStateError",
]
