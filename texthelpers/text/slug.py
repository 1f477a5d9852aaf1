"""Deterministic slug (URL-safe alias) generation.

Responsibilities:
- Normalize free-form titles into delimiter-joined identifiers.
- Keep Cyrillic content readable in ASCII slugs via transliteration.
- Guarantee no doubled or edge delimiters and a bounded length.
"""

from __future__ import annotations

import regex

from ..errors import InvalidArgumentError, require_positive
from ..telemetry.logger import log_degraded_step
from .affixes import trim_prefix, trim_suffix
from .patterns import substitute
from .spaces import normalize_spaces
from .transliteration import transliterate

DEFAULT_DELIMITER = "-"
DEFAULT_MAX_LENGTH = 255

_UNSAFE_UNICODE_PATTERN = r"[^\p{L}\p{N}\s]+"
_UNSAFE_ASCII_PATTERN = r"[^A-Za-z0-9\s]+"
_WHITESPACE_RUN_PATTERN = r"\s+"


def _replace_step(step: str, pattern: str, delimiter: str, text: str, flags: int = 0) -> str:
    """Replace `pattern` matches with `delimiter`, skipping the step on failure."""

    result = substitute(pattern, delimiter, text, flags)
    if not result.ok:
        log_degraded_step("slug", step, result.error)
        return text
    return result.value_or(text)


def _truncate(text: str, max_length: int, delimiter: str) -> str:
    """Cut `text` to `max_length`, dropping a delimiter the cut would split."""

    truncated = text[:max_length]
    if len(text) <= max_length:
        return truncated
    for overlap in range(1, len(delimiter)):
        start = max_length - overlap
        if start >= 0 and text.startswith(delimiter, start):
            return truncated[:start]
    return truncated


def slug(
    text: str,
    allow_uppercase: bool = False,
    allow_unicode: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Build a URL-safe alias from `text`.

    Args:
        text: Free-form source text.
        allow_uppercase: Keep the original letter case instead of lowercasing.
        allow_unicode: Keep any Unicode letter or number; otherwise Cyrillic is
            transliterated and only ASCII letters and digits survive.
        delimiter: Separator placed between words and over stripped characters.
        max_length: Maximum slug length in code points.

    Returns:
        Slug containing allowed characters joined by single delimiters, without
        a leading or trailing delimiter.

    Raises:
        InvalidArgumentError: If `max_length` is not positive or `delimiter` is empty.
    """

    require_positive(max_length, "max_length")
    if not delimiter:
        raise InvalidArgumentError("`delimiter` must be a non-empty string.")

    text = normalize_spaces(text)
    if not allow_uppercase:
        text = text.lower()
    text = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")

    # Underscores are intentional word separators; keep them as delimiters
    # before the unsafe-character pass would collapse them away.
    if delimiter != "_":
        text = text.replace("_", delimiter)

    if allow_unicode:
        unsafe_pattern = _UNSAFE_UNICODE_PATTERN
    else:
        unsafe_pattern = _UNSAFE_ASCII_PATTERN
        text = transliterate(text)

    text = _replace_step("strip_unsafe", unsafe_pattern, delimiter, text)
    text = _replace_step("whitespace", _WHITESPACE_RUN_PATTERN, delimiter, text)
    text = _replace_step(
        "collapse_delimiters",
        f"(?:{regex.escape(delimiter)})+",
        delimiter,
        text,
        regex.IGNORECASE,
    )

    text = _truncate(text, max_length, delimiter)
    return trim_prefix(trim_suffix(text, delimiter), delimiter)
