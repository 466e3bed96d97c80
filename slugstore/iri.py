"""IRI character classification and sanitizing.

RFC 3987 keeps ASCII letters, digits and ``_ - . ~`` as-is (the unreserved
URI characters) and additionally allows the "ucschar" ranges unencoded.
Everything else is replaced, never percent-encoded.

Python strings iterate by code point, so supplementary-plane characters are
classified whole. No Unicode normalization is applied anywhere: combining
sequences are classified one code point at a time, exactly as given.
"""

import string
from bisect import bisect_right

URI_CHARS = frozenset(string.ascii_letters + string.digits + "_-.~")

# Inclusive (low, high) ranges, sorted by low bound.
UCS_RANGES: tuple[tuple[int, int], ...] = (
    (0xA0, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFEF),
    (0x10000, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
    (0x40000, 0x4FFFD),
    (0x50000, 0x5FFFD),
    (0x60000, 0x6FFFD),
    (0x70000, 0x7FFFD),
    (0x80000, 0x8FFFD),
    (0x90000, 0x9FFFD),
    (0xA0000, 0xAFFFD),
    (0xB0000, 0xBFFFD),
    (0xC0000, 0xCFFFD),
    (0xD0000, 0xDFFFD),
    (0xE1000, 0xEFFFD),
)

_UCS_LOWS = [low for low, _ in UCS_RANGES]


def is_ucschar(code_point: int) -> bool:
    i = bisect_right(_UCS_LOWS, code_point) - 1
    return i >= 0 and code_point <= UCS_RANGES[i][1]


def is_uri_char(char: str) -> bool:
    return char in URI_CHARS


def is_iri_char(char: str) -> bool:
    """True if a single code point may appear unencoded in an IRI path."""
    return char in URI_CHARS or is_ucschar(ord(char))


def is_iri_string(text: str) -> bool:
    return all(is_iri_char(c) for c in text)


def _check_args(value, replacement, valid_char) -> None:
    if not isinstance(value, str):
        raise TypeError("The input slug must be a string.")
    if not isinstance(replacement, str):
        raise TypeError("`replacement` must be a string.")
    if not all(valid_char(c) for c in replacement):
        raise ValueError("`replacement` must be a valid IRI string.")


def sanitize_iri(value: str, replacement: str = "") -> str:
    """Replace every code point that is not IRI-safe with ``replacement``.

    Each unsafe code point is replaced individually, so three unsafe
    characters in a row produce three copies of ``replacement``. An empty
    replacement deletes unsafe characters.

    Raises TypeError for non-string arguments and ValueError when the
    replacement itself contains unsafe characters.
    """
    _check_args(value, replacement, is_iri_char)
    return "".join(c if is_iri_char(c) else replacement for c in value)


def sanitize_uri(value: str, replacement: str = "") -> str:
    """Like sanitize_iri, but only the ASCII URI characters are kept."""
    _check_args(value, replacement, is_uri_char)
    return "".join(c if c in URI_CHARS else replacement for c in value)
