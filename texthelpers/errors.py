"""Domain exceptions for text processing and CLI diagnostics."""

from __future__ import annotations


class TextProcessingError(RuntimeError):
    """Raised when a text operation cannot safely continue."""

    def __init__(
        self,
        *,
        operation: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an operation-scoped processing error."""

        super().__init__(detail)
        self.operation = operation
        self.detail = detail
        self.hint = hint


class InvalidArgumentError(ValueError):
    """Raised when a length, budget, or delimiter argument is out of domain."""


def require_positive(value: int, field_name: str) -> int:
    """Return `value` unchanged or raise when it is not a positive integer."""

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"`{field_name}` must be a positive integer.")
    return value
