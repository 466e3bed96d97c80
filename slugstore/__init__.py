"""IRI-safe slugs and a small file-backed content store built on them."""

from .iri import is_iri_char, is_iri_string, sanitize_iri, sanitize_uri  # noqa: F401
from .slugs import sanitize_slug  # noqa: F401
from .urls import get_collection_url, get_entry_url, get_new_entry_url  # noqa: F401
