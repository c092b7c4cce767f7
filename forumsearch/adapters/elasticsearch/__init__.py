"""
Elasticsearch Adapter - Forum search index client.
"""

from .client import ElasticsearchClient

__all__ = ["ElasticsearchClient"]
