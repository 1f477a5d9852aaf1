"""Literal affix trimming and line-break detection helpers."""

from __future__ import annotations

_LINE_BREAK_CHARS = ("\r", "\n")


def trim_prefix(text: str, remove: str) -> str:
    """Remove one leading occurrence of `remove` from `text`.

    Blank text yields an empty string; an empty `remove` leaves text unchanged.
    """

    if not text.strip():
        return ""
    if not remove:
        return text
    return text[len(remove):] if text.startswith(remove) else text


def trim_suffix(text: str, remove: str) -> str:
    """Remove one trailing occurrence of `remove` from `text`."""

    if not text.strip():
        return ""
    if not remove:
        return text
    return text[: -len(remove)] if text.endswith(remove) else text


def has_new_line(text: str) -> bool:
    """Return whether `text` contains a carriage return or line feed."""

    if not text.strip():
        return False
    return any(token in text for token in _LINE_BREAK_CHARS)
