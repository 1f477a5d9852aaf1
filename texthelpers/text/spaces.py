"""Unicode space normalization.

Responsibilities:
- Fold exotic space-like code points into a regular space.
- Collapse space runs and trim the result.
"""

from __future__ import annotations

from ..telemetry.logger import log_degraded_step
from .patterns import substitute

# NBSP, Mongolian vowel separator, U+2000..U+200F (en quad .. RLM),
# narrow NBSP, medium math space, ideographic space, BOM.
SPACE_LIKE_PATTERN = "[\u00a0\u180e\u2000-\u200f\u202f\u205f\u3000\ufeff]"
_SPACE_RUN_PATTERN = " {2,}"
_TRIM_CHARS = " \t\n\r\0\x0b"


def normalize_spaces(text: str) -> str:
    """Return `text` with space-like code points folded, collapsed, and trimmed.

    Whitespace-only input yields an empty string. When a pattern step fails the
    text passes through that step unchanged.
    """

    if not text.strip():
        return ""

    folded = substitute(SPACE_LIKE_PATTERN, " ", text)
    if not folded.ok:
        log_degraded_step("normalize_spaces", "fold", folded.error)
    text = folded.value_or(text)

    collapsed = substitute(_SPACE_RUN_PATTERN, " ", text)
    if not collapsed.ok:
        log_degraded_step("normalize_spaces", "collapse", collapsed.error)
    text = collapsed.value_or(text).strip(_TRIM_CHARS)

    return text if text.strip() else ""
