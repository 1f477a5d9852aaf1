"""Unit tests for slug generation."""

from __future__ import annotations

import pytest

from texthelpers.errors import InvalidArgumentError
from texthelpers.text import slug
import importlib

slug_module = importlib.import_module("texthelpers.text.slug")


@pytest.mark.parametrize(
    ("text", "allow_uppercase", "allow_unicode", "delimiter", "max_length", "expected"),
    [
        ("", False, False, "-", 255, ""),
        (
            " This\N{RIGHT-TO-LEFT MARK}\N{HAIR SPACE}is a test. ",
            False,
            False,
            "-",
            255,
            "this-is-a-test",
        ),
        ("This_is a_test.", False, False, "-", 255, "this-is-a-test"),
        ("This_is a test.", False, False, "_", 255, "this_is_a_test"),
        ('Is "this" \N{EM DASH} a test?', False, False, "-", 255, "is-this-a-test"),
        ("This is a test.", False, False, "-", 255, "this-is-a-test"),
        ("This is a test.", True, False, "-", 255, "This-is-a-test"),
        ("This is a test.", False, False, "-", 5, "this"),
        ("Это тест.", False, False, "-", 255, "eto-test"),
        ("Это тест.", True, False, "-", 255, "Eto-test"),
        ("Это тест.", False, False, "-", 5, "eto-t"),
        ("Это тест.", False, True, "-", 255, "это-тест"),
        ("Это тест.", True, True, "-", 255, "Это-тест"),
        ("Это тест.", False, True, "-", 5, "это-т"),
    ],
)
def test_slug_matches_expected_aliases(
    text: str,
    allow_uppercase: bool,
    allow_unicode: bool,
    delimiter: str,
    max_length: int,
    expected: str,
) -> None:
    assert slug(text, allow_uppercase, allow_unicode, delimiter, max_length) == expected


def test_slug_turns_line_breaks_into_single_delimiters() -> None:
    assert slug("First line\r\nSecond\rThird\nFourth") == "first-line-second-third-fourth"


def test_slug_escapes_regex_metacharacter_delimiters() -> None:
    """Delimiters such as `.` or `+` are matched literally when collapsing runs."""

    assert slug("Hello,   big world!", delimiter=".") == "hello.big.world"
    assert slug("one + two", delimiter="+") == "one+two"


def test_slug_accepts_multi_character_delimiters() -> None:
    assert slug("Alpha beta  gamma", delimiter="--") == "alpha--beta--gamma"


@pytest.mark.parametrize(
    ("text", "delimiter", "max_length", "expected"),
    [
        ("foo bar", "--", 4, "foo"),
        ("foo bar", "--", 5, "foo"),
        ("foo bar", "--", 6, "foo--b"),
        ("ab cd", "+-+", 4, "ab"),
        ("ab cd", "+-+", 3, "ab"),
    ],
)
def test_slug_truncation_never_leaves_a_partial_delimiter(
    text: str, delimiter: str, max_length: int, expected: str
) -> None:
    assert slug(text, delimiter=delimiter, max_length=max_length) == expected


def test_slug_drops_soft_sign_apostrophes_in_ascii_mode() -> None:
    assert slug("Мой день") == "moy-den"


def test_slug_keeps_unicode_digits_and_letters() -> None:
    assert slug("Ünïcode 2024 — café", allow_unicode=True) == "ünïcode-2024-café"


@pytest.mark.parametrize("max_length", [0, -1])
def test_slug_rejects_non_positive_max_length(max_length: int) -> None:
    with pytest.raises(InvalidArgumentError, match=r"`max_length` must be a positive integer\."):
        slug("Some title", max_length=max_length)


def test_slug_rejects_empty_delimiter() -> None:
    with pytest.raises(InvalidArgumentError, match="`delimiter` must be a non-empty string"):
        slug("Some title", delimiter="")


def test_slug_skips_failed_pattern_step_and_still_returns_result(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A broken unsafe-character pattern should degrade the output, not raise."""

    monkeypatch.setattr(slug_module, "_UNSAFE_ASCII_PATTERN", "[unclosed")

    result = slug("Hello world")

    assert result == "hello-world"
