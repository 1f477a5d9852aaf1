"""HTML detection and tag stripping collaborators.

Responsibilities:
- Decide whether a text carries markup tags.
- Reduce markup to its text content for previews.
"""

from __future__ import annotations

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


def _parse(text: str) -> BeautifulSoup:
    """Parse `text` with the stdlib-backed `html.parser` tree builder."""

    with warnings.catch_warnings():
        # Plain prose that looks like a path or URL is still valid input.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(text, "html.parser")


def strip_html_tags(text: str) -> str:
    """Return the text content of `text` with every markup tag removed.

    Character entities are decoded and text nodes are joined without any
    separator, so `<p>a</p><p>b</p>` becomes `ab`.
    """

    if not text:
        return ""
    return _parse(text).get_text()


def is_html_like(text: str) -> bool:
    """Return whether `text` contains at least one markup tag."""

    if not text.strip():
        return False
    return _parse(text).find() is not None
