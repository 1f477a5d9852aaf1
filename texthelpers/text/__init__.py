"""Text normalization and length-bounded chunking components.

This package provides space normalization, transliteration, slug generation,
intro extraction, and sentence/tag-aware splitting, plus the small markup,
encoding, and affix helpers they build on.
"""

from .affixes import has_new_line, trim_prefix, trim_suffix
from .chunking import TextChunker, split
from .encoding import (
    Encoding,
    detect_encoding,
    is_ascii,
    is_punycode,
    is_unicode,
    remove_corrupted_chars,
)
from .intro import intro
from .markup import is_html_like, strip_html_tags
from .misc import CharCase, CharCollection, class_name_to_id, random_string, set_leading_zeroes
from .patterns import PatternResult
from .slug import slug
from .spaces import normalize_spaces
from .transliteration import transliterate

__all__ = [
    "normalize_spaces",
    "transliterate",
    "slug",
    "intro",
    "split",
    "TextChunker",
    "PatternResult",
    "is_html_like",
    "strip_html_tags",
    "Encoding",
    "detect_encoding",
    "is_ascii",
    "is_unicode",
    "is_punycode",
    "remove_corrupted_chars",
    "trim_prefix",
    "trim_suffix",
    "has_new_line",
    "set_leading_zeroes",
    "class_name_to_id",
    "random_string",
    "CharCollection",
    "CharCase",
]
