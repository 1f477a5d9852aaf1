"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and split-part listings.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import TextProcessingError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, TextProcessingError):
        typer.secho(
            f"{command_name} failed at `{exc.operation}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_parts(parts: list[str], separator: str, as_json: bool) -> None:
    """Print split parts as a JSON array or separated by a marker line."""

    if as_json:
        typer.echo(json.dumps(parts, ensure_ascii=False, indent=2))
        return

    for position, part in enumerate(parts):
        if position:
            typer.echo(separator)
        typer.echo(part)
