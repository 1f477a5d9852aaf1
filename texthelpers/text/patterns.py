"""Pattern-matching primitives with explicit success/failure results.

Responsibilities:
- Wrap `regex` compile/sub/split/search calls in a `PatternResult` value.
- Let callers branch on pattern failures instead of catching exceptions.

The `regex` engine is used over `re` for Unicode property classes (`\\p{Po}`,
`\\p{L}`) and possessive quantifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import regex

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PatternResult(Generic[T]):
    """Outcome of one pattern operation.

    Attributes:
        value: Operation output; meaningful only when `ok` is true.
        error: Pattern-engine error captured from the operation, if any.
    """

    value: T | None = None
    error: regex.error | None = None

    @property
    def ok(self) -> bool:
        """Return whether the operation completed without a pattern error."""

        return self.error is None

    def value_or(self, fallback: T) -> T:
        """Return the operation value, or `fallback` when the operation failed."""

        if self.error is not None or self.value is None:
            return fallback
        return self.value


def compile_pattern(pattern: str, flags: int = 0) -> PatternResult[regex.Pattern]:
    """Compile `pattern`, capturing malformed-pattern errors."""

    try:
        return PatternResult(value=regex.compile(pattern, flags))
    except regex.error as exc:
        return PatternResult(error=exc)


def substitute(
    pattern: str,
    replacement: str,
    text: str,
    flags: int = 0,
) -> PatternResult[str]:
    """Replace every match of `pattern` with the literal `replacement` text."""

    compiled = compile_pattern(pattern, flags)
    if compiled.value is None:
        return PatternResult(error=compiled.error)
    try:
        return PatternResult(value=compiled.value.sub(lambda _match: replacement, text))
    except regex.error as exc:
        return PatternResult(error=exc)


def split_pattern(pattern: str, text: str, flags: int = 0) -> PatternResult[list[str]]:
    """Split `text` on `pattern`; capturing groups are kept in the output."""

    compiled = compile_pattern(pattern, flags)
    if compiled.value is None:
        return PatternResult(error=compiled.error)
    try:
        return PatternResult(value=compiled.value.split(text))
    except regex.error as exc:
        return PatternResult(error=exc)


def search(pattern: str, text: str, flags: int = 0) -> PatternResult[regex.Match | None]:
    """Search `text` for the first match of `pattern`."""

    compiled = compile_pattern(pattern, flags)
    if compiled.value is None:
        return PatternResult(error=compiled.error)
    try:
        return PatternResult(value=compiled.value.search(text))
    except regex.error as exc:
        return PatternResult(error=exc)
