"""Tests for filesystem-safe filename sanitizing."""

import pytest

from slugstore.filenames import (
    _RESERVED_RE,
    _WINDOWS_RESERVED_RE,
    _WINDOWS_TRAILING_RE,
    sanitize_filename,
)


def test_replaces_illegal_chars():
    assert sanitize_filename('a/b?c<d>e\\f:g*h|i"j', "-") == "a-b-c-d-e-f-g-h-i-j"


def test_removes_control_chars():
    assert sanitize_filename("a\x00b\x1fc\x85d") == "abcd"


def test_reserved_dot_names():
    assert sanitize_filename(".") == ""
    assert sanitize_filename("..") == ""
    assert sanitize_filename("..", "-") == "-"


@pytest.mark.parametrize("name", ["con", "CON", "nul.txt", "Com1", "lpt9.tar.gz"])
def test_windows_reserved_names(name):
    assert sanitize_filename(name) == ""


def test_windows_reserved_prefix_is_not_reserved():
    assert sanitize_filename("console") == "console"


def test_windows_trailing_dots_and_spaces():
    assert sanitize_filename("name. .") == "name"


def test_keeps_unicode():
    assert sanitize_filename("日本語のタイトル") == "日本語のタイトル"


def test_truncates_to_255_bytes():
    assert len(sanitize_filename("a" * 300)) == 255


def test_truncation_does_not_split_characters():
    result = sanitize_filename("é" * 200)
    assert result == "é" * 127
    assert len(result.encode("utf-8")) == 254


def test_illegal_replacement_is_sanitized_away():
    assert sanitize_filename("a/b", "?") == "ab"


def test_rejects_non_string():
    with pytest.raises(TypeError):
        sanitize_filename(None)


def test_anchors_do_not_match_before_trailing_newline():
    """Reserved-name and trailing patterns anchor at the very end of the name."""
    assert _RESERVED_RE.search("..\n") is None
    assert _WINDOWS_RESERVED_RE.search("nul\n") is None
    assert _WINDOWS_TRAILING_RE.search("name.\n") is None
    assert _RESERVED_RE.search("..") is not None


def test_trailing_newline_names():
    assert sanitize_filename("..\n") == ""
    assert sanitize_filename("nul\n") == ""
    assert sanitize_filename("name.\n") == "name"
