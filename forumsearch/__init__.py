"""
ForumSearch - Search relevance and query construction for forum content.

Example:
    >>> from forumsearch.deps import create_index_search
    >>> search = create_index_search()
    >>> results = await search.search('"door sensor" fault')
"""

__version__ = "2.0.0"
__all__ = ["__version__"]
