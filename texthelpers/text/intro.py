"""Length-bounded text previews.

Responsibilities:
- Strip markup and normalize spaces before measuring text.
- Cut previews at the first word or punctuation boundary at or after a
  minimum length, never in the middle of a word.
"""

from __future__ import annotations

from ..errors import require_positive
from ..telemetry.logger import log_degraded_step
from .affixes import has_new_line
from .markup import strip_html_tags
from .patterns import search, split_pattern, substitute
from .spaces import normalize_spaces

DEFAULT_INTRO_LENGTH = 200
DEFAULT_TRAILING_CHARS = "\N{HORIZONTAL ELLIPSIS}"

_LINE_BREAK_PATTERN = r"\r\n|\n\r|\n|\r"
_LINE_SPLIT_PATTERN = r"[\r\n]+"


def _boundary_pattern(length: int) -> str:
    """Return the shortest-prefix pattern for a minimum intro `length`.

    Group 1 holds at least `length` characters and is followed by a run of
    "other punctuation" (`\\p{Po}`), pipe, or whitespace characters.
    """

    return r"^(.{" + str(length) + r",}?)[\p{Po}|\s]++"


def _first_line(text: str) -> str:
    """Return the first non-empty line of `text`, or `text` when none is found."""

    result = split_pattern(_LINE_SPLIT_PATTERN, text)
    if not result.ok:
        log_degraded_step("intro", "first_line", result.error)
        return text
    for line in result.value_or([]):
        if line:
            return line
    return text


def _single_line(text: str) -> str:
    """Replace every line-break variant in `text` with one space."""

    result = substitute(_LINE_BREAK_PATTERN, " ", text)
    if not result.ok:
        log_degraded_step("intro", "join_lines", result.error)
    return result.value_or(text)


def intro(
    text: str,
    length: int = DEFAULT_INTRO_LENGTH,
    trailing_chars: str | None = DEFAULT_TRAILING_CHARS,
    use_first_line_only: bool = False,
) -> str:
    """Make a preview of `text` cut at a natural boundary.

    Text that already fits within `length` characters after markup stripping
    and space normalization is returned as-is, without `trailing_chars`. Text
    with no boundary at or after `length` characters is returned untruncated.

    Args:
        text: Full text, plain or HTML.
        length: Minimum number of characters kept before the cut.
        trailing_chars: Suffix appended to truncated previews; `None` selects
            the default ellipsis and an empty string disables the suffix.
        use_first_line_only: Restrict the preview to the first line of text.

    Raises:
        InvalidArgumentError: If `length` is not a positive integer.
    """

    require_positive(length, "length")
    if trailing_chars is None:
        trailing_chars = DEFAULT_TRAILING_CHARS

    text = normalize_spaces(strip_html_tags(text))
    if len(text) <= length:
        return text

    if use_first_line_only and has_new_line(text):
        text = _first_line(text)
    else:
        text = _single_line(text)

    result = search(_boundary_pattern(length), text)
    if not result.ok:
        log_degraded_step("intro", "boundary", result.error)
        return text

    match = result.value
    if match is None:
        return text
    return match.group(1) + trailing_chars
