"""
Adapters - External service integrations.

All external calls are wrapped here to isolate domains from third-party changes.
"""

from .elasticsearch import ElasticsearchClient
from .sqlite import SQLiteRepository

__all__ = [
    "ElasticsearchClient",
    "SQLiteRepository",
]
