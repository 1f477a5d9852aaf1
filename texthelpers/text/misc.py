"""Small identifier and formatting helpers."""

from __future__ import annotations

from enum import Enum
import secrets
import string

import regex

from ..errors import require_positive


class CharCollection(str, Enum):
    """Character collections available for random sequences."""

    ALPHA = "alpha"
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


class CharCase(str, Enum):
    """Letter case used for random sequences."""

    LOWER = "lower"
    UPPER = "upper"
    BOTH = "both"


_NAMESPACE_PREFIX_RE = regex.compile(r"^(?:\w+[.\\])*")
_INNER_CAPITAL_RE = regex.compile(r"(?<!^)[A-Z]")

_LETTERS_BY_CASE = {
    CharCase.LOWER: string.ascii_lowercase,
    CharCase.UPPER: string.ascii_uppercase,
    CharCase.BOTH: string.ascii_lowercase + string.ascii_uppercase,
}


def set_leading_zeroes(number: int, number_length: int = 2) -> str:
    """Left-pad `number` with zeroes up to `number_length` characters."""

    if number_length <= 0:
        return str(number)
    return str(number).rjust(number_length, "0")


def class_name_to_id(class_name: str) -> str:
    """Convert a (possibly namespaced) class name to a kebab-case identifier.

    Both dotted (`app.models.MyClass`) and backslashed (`App\\Models\\MyClass`)
    namespaces are dropped before conversion.
    """

    short_name = _NAMESPACE_PREFIX_RE.sub("", class_name)
    return _INNER_CAPITAL_RE.sub(lambda match: "-" + match.group(0), short_name).lower()


def random_string(
    length: int = 10,
    collection: CharCollection = CharCollection.ALPHANUMERIC,
    case: CharCase = CharCase.BOTH,
) -> str:
    """Return a cryptographically random sequence drawn from a character collection.

    Raises:
        InvalidArgumentError: If `length` is not a positive integer.
    """

    require_positive(length, "length")
    collection = CharCollection(collection)
    case = CharCase(case)

    if collection is CharCollection.NUMERIC:
        alphabet = string.digits
    elif collection is CharCollection.ALPHA:
        alphabet = _LETTERS_BY_CASE[case]
    else:
        alphabet = _LETTERS_BY_CASE[case] + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))
