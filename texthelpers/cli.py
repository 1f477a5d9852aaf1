"""Command-line interface for texthelpers.

Responsibilities:
- Expose the text operations as user-facing commands.
- Resolve operation defaults from CLI options, YAML config, and environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_parts, exit_with_command_error
from .config import ConfigLoader, TextDefaults
from .errors import TextProcessingError
from .telemetry.logger import RunLogger
from .text import intro, normalize_spaces, slug, split, transliterate

app = typer.Typer(
    name="texthelpers",
    no_args_is_help=True,
    help="Text normalization, slug, intro, and splitting helpers.",
)

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Input text. Omit or pass `-` to read from stdin."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with operation defaults."),
]


def _read_text(text: str | None) -> str:
    """Return the positional text, or stdin content when it is omitted or `-`."""

    if text is None or text == "-":
        return typer.get_text_stream("stdin").read()
    return text


def _resolve_defaults(config_file: Path | None) -> TextDefaults:
    """Resolve defaults from environment, then the optional YAML file on top."""

    try:
        base = ConfigLoader.from_env()
    except ValueError as exc:
        raise TextProcessingError(
            operation="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the offending `TEXTHELPERS_*` variable.",
        ) from exc

    if config_file is None:
        return base

    try:
        return ConfigLoader.from_yaml(config_file, base=base)
    except FileNotFoundError as exc:
        raise TextProcessingError(
            operation="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise TextProcessingError(
            operation="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _run_logger(ctx: typer.Context) -> RunLogger:
    """Return the run logger configured by the application callback."""

    if isinstance(ctx.obj, RunLogger):
        return ctx.obj
    return RunLogger(level="WARNING")


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Emit operation and degraded-step logs to stderr."),
    ] = False,
) -> None:
    """Configure logging for the invoked command."""

    ctx.obj = RunLogger(level="DEBUG" if verbose else "WARNING")


@app.command("normalize")
def normalize_command(ctx: typer.Context, text: TextArgument = None) -> None:
    """Fold Unicode spaces, collapse space runs, and trim the text."""

    run_logger = _run_logger(ctx)
    try:
        source = _read_text(text)
        run_logger.log_operation_start("normalize", chars=len(source))
        result = normalize_spaces(source)
    except Exception as exc:
        run_logger.log_operation_failure("normalize", type(exc).__name__)
        exit_with_command_error("normalize", exc)

    run_logger.log_operation_complete("normalize", chars=len(result))
    typer.echo(result)


@app.command("transliterate")
def transliterate_command(ctx: typer.Context, text: TextArgument = None) -> None:
    """Spell Cyrillic letters with Latin characters."""

    run_logger = _run_logger(ctx)
    try:
        source = _read_text(text)
        run_logger.log_operation_start("transliterate", chars=len(source))
        result = transliterate(source)
    except Exception as exc:
        run_logger.log_operation_failure("transliterate", type(exc).__name__)
        exit_with_command_error("transliterate", exc)

    run_logger.log_operation_complete("transliterate", chars=len(result))
    typer.echo(result)


@app.command("slug")
def slug_command(
    ctx: typer.Context,
    text: TextArgument = None,
    uppercase: Annotated[
        bool | None,
        typer.Option("--uppercase/--no-uppercase", help="Keep the original letter case."),
    ] = None,
    unicode: Annotated[
        bool | None,
        typer.Option(
            "--unicode/--no-unicode",
            help="Keep Unicode letters and numbers instead of transliterating to ASCII.",
        ),
    ] = None,
    delimiter: Annotated[
        str | None, typer.Option("--delimiter", help="Word delimiter.")
    ] = None,
    max_length: Annotated[
        int | None, typer.Option("--max-length", help="Maximum slug length.")
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Build a URL-safe alias from the text."""

    run_logger = _run_logger(ctx)
    try:
        defaults = _resolve_defaults(config_file).with_overrides(
            slug_allow_uppercase=uppercase,
            slug_allow_unicode=unicode,
            slug_delimiter=delimiter,
            slug_max_length=max_length,
        )
        source = _read_text(text)
        run_logger.log_operation_start("slug", chars=len(source))
        result = slug(
            source,
            allow_uppercase=defaults.slug_allow_uppercase,
            allow_unicode=defaults.slug_allow_unicode,
            delimiter=defaults.slug_delimiter,
            max_length=defaults.slug_max_length,
        )
    except Exception as exc:
        run_logger.log_operation_failure("slug", type(exc).__name__)
        exit_with_command_error("slug", exc)

    run_logger.log_operation_complete("slug", chars=len(result))
    typer.echo(result)


@app.command("intro")
def intro_command(
    ctx: typer.Context,
    text: TextArgument = None,
    length: Annotated[
        int | None,
        typer.Option("--length", help="Minimum number of characters before the cut."),
    ] = None,
    trailing: Annotated[
        str | None,
        typer.Option("--trailing", help="Suffix appended to truncated intros."),
    ] = None,
    first_line_only: Annotated[
        bool | None,
        typer.Option("--first-line-only/--all-lines", help="Use only the first text line."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Print a boundary-respecting preview of the text."""

    run_logger = _run_logger(ctx)
    try:
        defaults = _resolve_defaults(config_file).with_overrides(
            intro_length=length,
            intro_trailing_chars=trailing,
            intro_first_line_only=first_line_only,
        )
        source = _read_text(text)
        run_logger.log_operation_start("intro", chars=len(source))
        result = intro(
            source,
            length=defaults.intro_length,
            trailing_chars=defaults.intro_trailing_chars,
            use_first_line_only=defaults.intro_first_line_only,
        )
    except Exception as exc:
        run_logger.log_operation_failure("intro", type(exc).__name__)
        exit_with_command_error("intro", exc)

    run_logger.log_operation_complete("intro", chars=len(result))
    typer.echo(result)


@app.command("split")
def split_command(
    ctx: typer.Context,
    text: TextArgument = None,
    max_part_length: Annotated[
        int | None,
        typer.Option("--max-part-length", help="Character budget per part."),
    ] = None,
    separator: Annotated[
        str, typer.Option("--separator", help="Marker line printed between parts.")
    ] = "---",
    as_json: Annotated[
        bool, typer.Option("--json", help="Print parts as a JSON array.")
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Split the text into sentence- or tag-bounded parts."""

    run_logger = _run_logger(ctx)
    try:
        defaults = _resolve_defaults(config_file).with_overrides(
            max_part_length=max_part_length,
        )
        source = _read_text(text)
        run_logger.log_operation_start("split", chars=len(source))
        parts = split(source, max_part_length=defaults.max_part_length)
    except Exception as exc:
        run_logger.log_operation_failure("split", type(exc).__name__)
        exit_with_command_error("split", exc)

    run_logger.log_operation_complete("split", parts=len(parts))
    echo_parts(parts, separator=separator, as_json=as_json)


def main() -> None:
    """Run the CLI application."""

    app()
