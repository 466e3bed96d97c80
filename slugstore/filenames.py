"""Filename sanitizing for names that must be valid on common filesystems.

Replaces characters that Windows, macOS or Linux reject in file names,
guards against reserved names (``.``, ``..``, ``CON``, ``LPT1.txt`` ...)
and truncates to 255 bytes of UTF-8.
"""

import re

MAX_FILENAME_BYTES = 255

_ILLEGAL_RE = re.compile(r'[/?<>\\:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED_RE = re.compile(r"^\.+\Z")
_WINDOWS_RESERVED_RE = re.compile(
    r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?\Z", re.IGNORECASE
)
_WINDOWS_TRAILING_RE = re.compile(r"[. ]+\Z")


def _truncate_utf8(value: str, limit: int) -> str:
    encoded = value.encode("utf-8")
    if len(encoded) <= limit:
        return value
    # Drop any partial multi-byte sequence left at the cut.
    return encoded[:limit].decode("utf-8", errors="ignore")


def _sanitize(value: str, replacement: str) -> str:
    value = _ILLEGAL_RE.sub(replacement, value)
    value = _CONTROL_RE.sub(replacement, value)
    value = _RESERVED_RE.sub(replacement, value)
    value = _WINDOWS_RESERVED_RE.sub(replacement, value)
    value = _WINDOWS_TRAILING_RE.sub(replacement, value)
    return _truncate_utf8(value, MAX_FILENAME_BYTES)


def sanitize_filename(value: str, replacement: str = "") -> str:
    """Return ``value`` with filesystem-illegal parts replaced by ``replacement``.

    If the replacement itself is not a legal file name fragment the result is
    sanitized once more with an empty replacement.
    """
    if not isinstance(value, str):
        raise TypeError("The input filename must be a string.")
    sanitized = _sanitize(value, replacement)
    if replacement == "":
        return sanitized
    return _sanitize(sanitized, "")
