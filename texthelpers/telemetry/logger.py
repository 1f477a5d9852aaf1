"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic operation-level logs through `loguru`.
- Report degraded (skipped) pattern steps without leaking input text.

The package disables its own loguru records on import; `RunLogger` re-enables
them for CLI runs or for library users who want diagnostics.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

PACKAGE_LOGGER_NAME = "texthelpers"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def format_event(level: str, event: str, operation: str, **context: object) -> str:
    """Return one structured log line for an operation event."""

    return f"[text] level={level} op={operation} event={event}{_format_context(context)}"


def log_degraded_step(operation: str, step: str, error: BaseException) -> None:
    """Record that a pattern step was skipped and its input passed through."""

    logger.debug(
        format_event(
            "DEBUG",
            "degraded",
            operation,
            step=step,
            error_type=type(error).__name__,
        )
    )


class RunLogger:
    """Emit deterministic operation logs for CLI-observable activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize the loguru sink and enable package-level records."""

        self._sink = sink or sys.stderr
        logger.enable(PACKAGE_LOGGER_NAME)
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        logger.log(level, format_event(level, event, operation, **context))

    def log_operation_start(self, operation: str, **context: object) -> None:
        """Emit an operation-start event."""

        self._emit("INFO", "start", operation, **context)

    def log_operation_complete(self, operation: str, **context: object) -> None:
        """Emit an operation-complete event."""

        self._emit("INFO", "complete", operation, **context)

    def log_operation_failure(self, operation: str, error_type: str) -> None:
        """Emit an operation-failure event without the offending text payload."""

        self._emit("ERROR", "failure", operation, error_type=error_type)
