"""Cyrillic-to-Latin transliteration.

Responsibilities:
- Map the 33-letter Cyrillic alphabet (both cases) to Latin spellings.
- Drop apostrophe and grave-accent characters.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CYRILLIC_TO_LATIN: Mapping[str, str] = MappingProxyType(
    {
        "а": "a",
        "б": "b",
        "в": "v",
        "г": "g",
        "д": "d",
        "е": "e",
        "ё": "yo",
        "ж": "zh",
        "з": "z",
        "и": "i",
        "й": "y",
        "к": "k",
        "л": "l",
        "м": "m",
        "н": "n",
        "о": "o",
        "п": "p",
        "р": "r",
        "с": "s",
        "т": "t",
        "у": "u",
        "ф": "f",
        "х": "h",
        "ц": "ts",
        "ч": "ch",
        "ш": "sh",
        "щ": "shch",
        "ъ": "",
        "ы": "i",
        "ь": "'",
        "э": "e",
        "ю": "yu",
        "я": "ya",
        "'": "",
        "`": "",
        "А": "A",
        "Б": "B",
        "В": "V",
        "Г": "G",
        "Д": "D",
        "Е": "E",
        "Ё": "Yo",
        "Ж": "Zh",
        "З": "Z",
        "И": "I",
        "Й": "Y",
        "К": "K",
        "Л": "L",
        "М": "M",
        "Н": "N",
        "О": "O",
        "П": "P",
        "Р": "R",
        "С": "S",
        "Т": "T",
        "У": "U",
        "Ф": "F",
        "Х": "H",
        "Ц": "Ts",
        "Ч": "Ch",
        "Ш": "Sh",
        "Щ": "Shch",
        "Ъ": "",
        "Ы": "I",
        "Ь": "'",
        "Э": "E",
        "Ю": "Yu",
        "Я": "Ya",
    }
)

# Single-pass code-point table: the `'` emitted for soft signs is never
# removed again by the apostrophe entry.
_TRANSLATION_TABLE = str.maketrans(dict(CYRILLIC_TO_LATIN))


def transliterate(text: str) -> str:
    """Return `text` with Cyrillic letters spelled in Latin characters."""

    if not text.strip():
        return ""
    return text.translate(_TRANSLATION_TABLE)
