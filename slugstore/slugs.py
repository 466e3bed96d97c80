"""Slug normalization: IRI filter → filename filter → collapse → strip.

"This, that-one_or.the~other 123!" → "This-that-one_or.the~other-123"
"""

import re

from .filenames import sanitize_filename
from .iri import sanitize_iri, sanitize_uri

ENCODINGS = {
    "unicode": sanitize_iri,
    "ascii": sanitize_uri,
}


def sanitize_slug(value: str, replacement: str = "-", *, encoding: str = "unicode") -> str:
    """Turn arbitrary text into a URL- and filesystem-safe slug.

    Unsafe characters become ``replacement``; runs of consecutive
    replacements collapse into one and a trailing replacement is dropped.
    ``encoding="ascii"`` keeps only the ASCII URI characters.
    """
    if not isinstance(value, str):
        raise TypeError("The input slug must be a string.")
    if not isinstance(replacement, str):
        raise TypeError("`replacement` must be a string.")
    sanitize_chars = ENCODINGS.get(encoding)
    if sanitize_chars is None:
        raise ValueError(f"Unknown slug encoding: {encoding!r}")

    slug = sanitize_chars(value, replacement)
    slug = sanitize_filename(slug, replacement)
    if not replacement:
        return slug

    token = re.escape(replacement)
    slug = re.sub(f"(?:{token})+", replacement, slug)
    slug = re.sub(f"{token}\\Z", "", slug)
    return slug
