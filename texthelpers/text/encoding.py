"""Character-encoding detection and repair for text and raw byte payloads."""

from __future__ import annotations

from enum import Enum


_PUNYCODE_PREFIX = "xn--"


class Encoding(str, Enum):
    """Encodings a payload can be classified as."""

    ASCII = "ASCII"
    UTF8 = "UTF-8"
    UNKNOWN = "unknown"


def detect_encoding(payload: str | bytes) -> Encoding:
    """Classify `payload` as pure ASCII, valid UTF-8, or unknown.

    `str` input is unknown only when it holds lone surrogates that cannot be
    encoded; `bytes` input is decoded strictly.
    """

    if isinstance(payload, str):
        if payload.isascii():
            return Encoding.ASCII
        try:
            payload.encode("utf-8")
        except UnicodeEncodeError:
            return Encoding.UNKNOWN
        return Encoding.UTF8

    if payload.isascii():
        return Encoding.ASCII
    try:
        payload.decode("utf-8")
    except UnicodeDecodeError:
        return Encoding.UNKNOWN
    return Encoding.UTF8


def is_ascii(payload: str | bytes) -> bool:
    """Return whether `payload` contains only ASCII characters."""

    return detect_encoding(payload) is Encoding.ASCII


def is_unicode(payload: str | bytes) -> bool:
    """Return whether `payload` is valid UTF-8 (ASCII included)."""

    return detect_encoding(payload) is not Encoding.UNKNOWN


def is_punycode(text: str) -> bool:
    """Return whether `text` is an ASCII `xn--` name that decodes as IDNA.

    Dotted host names are decoded label by label, so `xn--bcher-kva.example`
    qualifies while `xn--` on its own or a malformed label does not.
    """

    if not is_ascii(text) or not text.startswith(_PUNYCODE_PREFIX):
        return False
    try:
        text.encode("ascii").decode("idna")
    except UnicodeError:
        return False
    return True


def remove_corrupted_chars(payload: str | bytes) -> str:
    """Return `payload` as text with undecodable sequences dropped.

    Invalid UTF-8 byte sequences in `bytes` and lone surrogates in `str` are
    removed; every valid character is kept in order.
    """

    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="ignore")
    return payload.encode("utf-8", errors="ignore").decode("utf-8")
