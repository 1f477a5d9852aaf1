"""Basic smoke tests for project wiring.

These tests verify only import-level behavior and the public entry points.
"""

import texthelpers
from texthelpers.cli import app
from texthelpers.config import TextDefaults


def test_package_exposes_text_operations() -> None:
    """Top-level package should re-export the five text operations."""

    assert texthelpers.__version__ == "0.1.0"
    for name in ("normalize_spaces", "transliterate", "slug", "intro", "split"):
        assert callable(getattr(texthelpers, name))


def test_operations_run_end_to_end() -> None:
    assert texthelpers.normalize_spaces(" a  b ") == "a b"
    assert texthelpers.transliterate("Привет") == "Privet"
    assert texthelpers.slug("Hello World") == "hello-world"
    assert texthelpers.intro("short", 10) == "short"
    assert texthelpers.split("short", 10) == ["short"]


def test_defaults_and_cli_app_can_be_created() -> None:
    """Config defaults and the CLI app should be constructible."""

    assert TextDefaults().max_part_length > 0
    assert app is not None
