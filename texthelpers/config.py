"""Configuration model and loaders for texthelpers.

Responsibilities:
- Define default operation settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Resolve CLI overrides with deterministic precedence.

Key types:
- `TextDefaults`: validated defaults for intro, split, and slug operations.
- `ConfigLoader`: static construction helpers for `TextDefaults`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_positive_int,
    parse_required_boolean,
)
from .text.chunking import DEFAULT_MAX_PART_LENGTH
from .text.intro import DEFAULT_INTRO_LENGTH, DEFAULT_TRAILING_CHARS
from .text.slug import DEFAULT_DELIMITER, DEFAULT_MAX_LENGTH

ENV_PREFIX = "TEXTHELPERS_"


@dataclass(frozen=True, slots=True)
class TextDefaults:
    """Default settings applied when an operation argument is not given.

    Attributes:
        intro_length: Minimum intro length before the boundary cut.
        intro_trailing_chars: Suffix appended to truncated intros.
        intro_first_line_only: Restrict intros to the first text line.
        max_part_length: Character budget per split part.
        slug_delimiter: Separator used between slug words.
        slug_max_length: Maximum slug length.
        slug_allow_uppercase: Keep letter case in slugs.
        slug_allow_unicode: Keep Unicode letters and numbers in slugs.
    """

    intro_length: int = DEFAULT_INTRO_LENGTH
    intro_trailing_chars: str = DEFAULT_TRAILING_CHARS
    intro_first_line_only: bool = False
    max_part_length: int = DEFAULT_MAX_PART_LENGTH
    slug_delimiter: str = DEFAULT_DELIMITER
    slug_max_length: int = DEFAULT_MAX_LENGTH
    slug_allow_uppercase: bool = False
    slug_allow_unicode: bool = False

    def validate(self) -> None:
        """Validate defaults before they are handed to text operations."""

        parse_positive_int(self.intro_length, "intro_length")
        parse_positive_int(self.max_part_length, "max_part_length")
        parse_positive_int(self.slug_max_length, "slug_max_length")
        if not isinstance(self.slug_delimiter, str) or not self.slug_delimiter:
            raise ValueError("`slug_delimiter` must be a non-empty string.")
        if not isinstance(self.intro_trailing_chars, str):
            raise ValueError("`intro_trailing_chars` must be a string.")

    def with_overrides(self, **overrides: object) -> TextDefaults:
        """Return a validated copy with every non-`None` override applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        updated = replace(self, **applied)
        updated.validate()
        return updated


_INT_FIELDS = frozenset({"intro_length", "max_part_length", "slug_max_length"})
_BOOL_FIELDS = frozenset(
    {"intro_first_line_only", "slug_allow_uppercase", "slug_allow_unicode"}
)
# Trailing characters may legitimately be blank or space-padded.
_RAW_STRING_FIELDS = frozenset({"intro_trailing_chars"})


class ConfigLoader:
    """Factory methods for creating `TextDefaults` from external sources."""

    _SUPPORTED_KEYS = frozenset(field.name for field in fields(TextDefaults))

    @staticmethod
    def from_yaml(path: Path, base: TextDefaults | None = None) -> TextDefaults:
        """Create validated defaults from a YAML file, layered over `base`."""

        path_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(path_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`", base=base)

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TextDefaults:
        """Create validated defaults from `TEXTHELPERS_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key in ConfigLoader._SUPPORTED_KEYS:
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if env_key not in env_map:
                continue
            raw_value = env_map[env_key]
            if key not in _RAW_STRING_FIELDS and normalize_optional_string(raw_value) is None:
                continue
            payload[key] = raw_value
        return ConfigLoader.from_mapping(payload, source_label="Environment")

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: TextDefaults | None = None,
    ) -> TextDefaults:
        """Build validated defaults from a key/value mapping layered over `base`."""

        unknown = sorted(set(map(str, payload)).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        values: dict[str, Any] = {}
        for key, raw_value in payload.items():
            try:
                values[key] = ConfigLoader._coerce(key, raw_value)
            except ValueError as exc:
                raise ValueError(f"{source_label}: {exc}") from exc

        defaults = replace(base if base is not None else TextDefaults(), **values)
        defaults.validate()
        return defaults

    @staticmethod
    def _coerce(key: str, raw_value: Any) -> Any:
        """Coerce one raw payload value to the field's type."""

        if key in _INT_FIELDS:
            return parse_positive_int(raw_value, key)
        if key in _BOOL_FIELDS:
            return parse_required_boolean(raw_value, key)
        if key in _RAW_STRING_FIELDS:
            return "" if raw_value is None else str(raw_value)

        value = normalize_optional_string(raw_value)
        if value is None:
            raise ValueError(f"`{key}` must be a non-empty string.")
        return value
