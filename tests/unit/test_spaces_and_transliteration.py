"""Unit tests for space normalization and Cyrillic transliteration."""

from __future__ import annotations

import pytest

from texthelpers.text import normalize_spaces, transliterate
from texthelpers.text.transliteration import CYRILLIC_TO_LATIN
import texthelpers.text.spaces as spaces_module

NBSP = "\N{NO-BREAK SPACE}"
NARROW_NBSP = "\N{NARROW NO-BREAK SPACE}"
RLM = "\N{RIGHT-TO-LEFT MARK}"
HAIR_SPACE = "\N{HAIR SPACE}"
EM_SPACE = "\N{EM SPACE}"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("   ", ""),
        ("This is a test.", "This is a test."),
        (f"This {NBSP} is {NBSP} a {NBSP} test.", "This is a test."),
        (f"This {NARROW_NBSP} is {NARROW_NBSP} a {NARROW_NBSP} test.", "This is a test."),
        (f"This {RLM} is {RLM}{HAIR_SPACE} a {RLM} test.{EM_SPACE}", "This is a test."),
        (f"{NBSP}{EM_SPACE}{NBSP}", ""),
    ],
)
def test_normalize_spaces_folds_collapses_and_trims(text: str, expected: str) -> None:
    assert normalize_spaces(text) == expected


@pytest.mark.parametrize(
    "code_point",
    [0x00A0, 0x180E, 0x2000, 0x2005, 0x200B, 0x200F, 0x202F, 0x205F, 0x3000, 0xFEFF],
)
def test_normalize_spaces_covers_every_space_like_code_point(code_point: int) -> None:
    """Each listed code point should behave exactly like a regular space."""

    assert normalize_spaces(f"a{chr(code_point)}b") == "a b"
    assert normalize_spaces(f"a {chr(code_point)} b") == "a b"


def test_normalize_spaces_keeps_line_breaks_between_words() -> None:
    """Only space runs collapse; inner line breaks are structural and survive."""

    assert normalize_spaces("first  line\nsecond   line") == "first line\nsecond line"


def test_normalize_spaces_skips_failed_collapse_step_and_keeps_folding(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A broken collapse pattern leaves space runs alone but still folds and trims."""

    monkeypatch.setattr(spaces_module, "_SPACE_RUN_PATTERN", "(unclosed")

    assert normalize_spaces(f"a{NBSP}b ") == "a b"
    assert normalize_spaces(f" a{NBSP}{NBSP}b ") == "a  b"


def test_normalize_spaces_skips_failed_fold_step_and_keeps_collapsing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(spaces_module, "SPACE_LIKE_PATTERN", "[unclosed")

    assert normalize_spaces(f"a   b{NBSP} ") == f"a b{NBSP}"


def test_normalize_spaces_is_idempotent_on_mixed_input() -> None:
    text = f"  {NBSP}Mixed{EM_SPACE}{EM_SPACE}spacing \n and {RLM}marks  "

    once = normalize_spaces(text)

    assert normalize_spaces(once) == once
    assert "  " not in once
    assert once == once.strip(" ")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("   ", ""),
        ("This is a test.", "This is a test."),
        ("This is a тест.", "This is a test."),
        ("Это тест.", "Eto test."),
        ("Щука и ёж", "Shchuka i yozh"),
        ("подъезд", "podezd"),
        ("день", "den'"),
        ("it's `quoted`", "its quoted"),
    ],
)
def test_transliterate_maps_cyrillic_to_latin(text: str, expected: str) -> None:
    assert transliterate(text) == expected


def test_transliteration_table_covers_full_alphabet_in_both_cases() -> None:
    """The table holds 33 lowercase and 33 uppercase letters plus two quote marks."""

    lowercase = [key for key in CYRILLIC_TO_LATIN if key.islower()]
    uppercase = [key for key in CYRILLIC_TO_LATIN if key.isupper()]

    assert len(lowercase) == 33
    assert len(uppercase) == 33
    assert len(CYRILLIC_TO_LATIN) == 68
    assert {"'", "`"} <= set(CYRILLIC_TO_LATIN)


def test_transliteration_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CYRILLIC_TO_LATIN["а"] = "x"  # type: ignore[index]


def test_transliterate_passes_through_unknown_characters() -> None:
    assert transliterate("Ελληνικά 123 ünïcode") == "Ελληνικά 123 ünïcode"
