"""
Summary formatting for relational search rows.
"""

from __future__ import annotations

import html
import re

__all__ = ["condense", "to_html"]

PASSTHROUGH_FORMATS = {"html", "wysiwyg", "raw"}

_BR_RUN = re.compile(r"(?:<br\s*/?>\s*)+", re.IGNORECASE)
_BR_BEFORE_IMG = re.compile(r"/>\s*<br />\s*<img", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def to_html(body: str, fmt: str | None = None) -> str:
    """
    Render a stored body as HTML.

    Html-like formats pass through; everything else is treated as plain
    text and escaped.
    """
    if (fmt or "html").lower() in PASSTHROUGH_FORMATS:
        return body
    text = html.escape(body).replace("\r\n", "\n")
    return text.replace("\n", "<br />\n")


def condense(markup: str) -> str:
    """Collapse repeated line breaks and whitespace."""
    markup = _BR_RUN.sub("<br />", markup)
    markup = _BR_BEFORE_IMG.sub("/> <img", markup)
    return _WHITESPACE.sub(" ", markup).strip()
