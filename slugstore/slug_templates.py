"""Handlebars slug templates for collection entries.

A collection's ``slug_template`` decides how entry file names are built,
e.g. ``{{year}}-{{month}}-{{day}}-{{slug}}`` or ``{{fields.lang}}-{{slug}}``.
Every context value is sanitized before rendering, and the rendered result
is sanitized again as a whole so literal template text is safe too.
"""

import re
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pybars

from .slugs import sanitize_slug

DEFAULT_SLUG_TEMPLATE = "{{slug}}"

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class SlugTemplateError(Exception):
    """Raised when a slug template fails to compile or render."""


def prepare_slug(text: str) -> str:
    """Lowercase and drop apostrophes/quotes before hyphenation.

    "Dragon's Hollow" → "dragons hollow"
    """
    text = text.strip().lower()
    return re.sub(r"['\"’]", "", text)


def _segment(value: Any, replacement: str, encoding: str) -> str:
    return sanitize_slug(prepare_slug(str(value)), replacement, encoding=encoding)


def build_slug_context(
    title: str,
    data: dict[str, Any] | None = None,
    now: datetime | None = None,
    *,
    replacement: str = "-",
    encoding: str = "unicode",
) -> dict[str, Any]:
    """Assemble template variables for an entry.

    ``slug`` is the sanitized title, date parts are zero-padded strings and
    ``fields`` holds sanitized copies of the scalar values in ``data``.
    """
    now = now or datetime.now(timezone.utc)
    fields = {}
    for key, value in (data or {}).items():
        if isinstance(value, (str, int, float, bool)):
            fields[key] = _segment(value, replacement, encoding)
    return {
        "slug": _segment(title, replacement, encoding),
        "year": f"{now.year:04d}",
        "month": f"{now.month:02d}",
        "day": f"{now.day:02d}",
        "hour": f"{now.hour:02d}",
        "minute": f"{now.minute:02d}",
        "second": f"{now.second:02d}",
        "fields": fields,
    }


def render_slug(
    template_str: str,
    context: dict[str, Any],
    *,
    replacement: str = "-",
    encoding: str = "unicode",
) -> str:
    """Compile and render a slug template, then sanitize the result.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        rendered = str(compiled(context))
    except Exception as e:
        raise SlugTemplateError(f"Slug template error: {e}") from e
    return sanitize_slug(rendered, replacement, encoding=encoding)
