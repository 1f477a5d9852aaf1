"""Sentence- and tag-aware text splitting.

Responsibilities:
- Split long text into parts bounded by a character budget.
- Never cut through a sentence (plain text) or a markup tag (HTML).
- Treat the budget as a soft cap: one oversized sentence or tag keeps its own part.
"""

from __future__ import annotations

from ..errors import TextProcessingError, require_positive
from .markup import is_html_like
from .patterns import split_pattern
from .spaces import normalize_spaces

DEFAULT_MAX_PART_LENGTH = 1000


class TextChunker:
    """Split normalized text into ordered, budget-bounded parts."""

    # Tag names start with a letter, so prose such as `<3` or `a < b` stays text.
    _TAG_SPLIT_PATTERN = r"(</?[A-Za-z][^>]*>)"
    _SENTENCE_SPLIT_PATTERN = r"(?<=[.!?])\s+"

    def split(self, text: str, max_part_length: int = DEFAULT_MAX_PART_LENGTH) -> list[str]:
        """Split `text` into parts of at most `max_part_length` characters.

        Args:
            text: Plain or HTML text.
            max_part_length: Character budget per part.

        Returns:
            Non-empty, order-preserving list of parts. Text that fits the budget
            is returned as a single part.

        Raises:
            InvalidArgumentError: If `max_part_length` is not a positive integer.
            TextProcessingError: If the text cannot be tokenized.
        """

        require_positive(max_part_length, "max_part_length")

        text = normalize_spaces(text)
        if len(text) <= max_part_length:
            return [text]

        html_mode = is_html_like(text)
        tokens = self._tokenize(text, html_mode)
        return self._pack(tokens, max_part_length, separator="" if html_mode else " ")

    def _tokenize(self, text: str, html_mode: bool) -> list[tuple[str, bool]]:
        """Return `(token, is_tag)` pairs in text order, without empty tokens."""

        pattern = self._TAG_SPLIT_PATTERN if html_mode else self._SENTENCE_SPLIT_PATTERN
        result = split_pattern(pattern, text)
        if result.value is None:
            raise TextProcessingError(
                operation="split",
                detail=f"Failed to tokenize text for splitting: {result.error}",
                hint="Check the tokenizer patterns; splitting cannot proceed without them.",
            )

        if not html_mode:
            return [(token, False) for token in result.value if token]

        # The tag pattern has one capturing group, so odd positions are tags.
        return [
            (token, position % 2 == 1)
            for position, token in enumerate(result.value)
            if token
        ]

    def _pack(
        self,
        tokens: list[tuple[str, bool]],
        max_part_length: int,
        separator: str,
    ) -> list[str]:
        """Greedily accumulate tokens into parts within the character budget."""

        parts: list[str] = []
        current = ""
        for token, is_tag in tokens:
            if is_tag:
                current += token
                continue

            joiner = separator if current else ""
            if len(current) + len(joiner) + len(token) <= max_part_length:
                current += joiner + token
                continue

            if current:
                parts.append(current)
            # Whitespace between two parts belongs to neither of them.
            current = token if token.strip() else ""

        if current:
            parts.append(current)
        return parts


def split(text: str, max_part_length: int = DEFAULT_MAX_PART_LENGTH) -> list[str]:
    """Split `text` into sentence- or tag-bounded parts; see `TextChunker.split`."""

    return TextChunker().split(text, max_part_length)
