"""
Canonical discussion and comment URLs.
"""

from __future__ import annotations

__all__ = ["THREAD_PREFIX", "comment_url", "discussion_url", "is_thread_identifier"]

# Index identifiers for discussion (thread-origin) records look like "D_123"
THREAD_PREFIX = "D_"


def discussion_url(discussion_id: int | str, site_url: str = "") -> str:
    """URL of the thread view."""
    return f"{site_url.rstrip('/')}/discussion/{discussion_id}"


def comment_url(comment_id: int | str, site_url: str = "") -> str:
    """URL of a reply, anchored inside its thread."""
    return f"{site_url.rstrip('/')}/discussion/comment/{comment_id}/#Comment_{comment_id}"


def is_thread_identifier(identifier: str) -> bool:
    return identifier.startswith(THREAD_PREFIX)
