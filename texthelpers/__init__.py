"""Top-level package for texthelpers.

This package provides pure, deterministic text helpers: Unicode space
normalization, Cyrillic transliteration, slug generation, boundary-respecting
intro extraction, and sentence/tag-aware splitting into bounded parts.
"""

from loguru import logger

from .errors import InvalidArgumentError, TextProcessingError
from .text import intro, normalize_spaces, slug, split, transliterate

logger.disable(__name__)

__all__ = [
    "normalize_spaces",
    "transliterate",
    "slug",
    "intro",
    "split",
    "InvalidArgumentError",
    "TextProcessingError",
    "__version__",
]

__version__ = "0.1.0"
