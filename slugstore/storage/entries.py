"""Entry CRUD within a collection. Entry file names are rendered slugs."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from slugstore.slug_templates import DEFAULT_SLUG_TEMPLATE, build_slug_context, render_slug

from .collections import get_collection
from .config import get_config
from .core import collections_dir, is_path_part

logger = logging.getLogger(__name__)


def _entries_dir(collection: str) -> Path:
    return collections_dir() / collection


def _entry_path(collection: str, slug: str) -> Path:
    return _entries_dir(collection) / f"{slug}.json"


def _find_entry(collection: str, slug: str) -> Path | None:
    """Path of an existing entry, or None. get_collection() rejects names
    that are not a single path part, so only the slug is checked here."""
    if not is_path_part(slug) or get_collection(collection) is None:
        return None
    path = _entry_path(collection, slug)
    return path if path.is_file() else None


def list_entries(collection: str) -> list[dict[str, Any]] | None:
    if get_collection(collection) is None:
        return None
    results = []
    if _entries_dir(collection).is_dir():
        for path in sorted(_entries_dir(collection).glob("*.json")):
            results.append(json.loads(path.read_text()))
    return results


def get_entry(collection: str, slug: str) -> dict[str, Any] | None:
    path = _find_entry(collection, slug)
    if path is None:
        return None
    return json.loads(path.read_text())


def create_entry(
    collection: str,
    title: str,
    body: str = "",
    data: dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Create an entry whose slug is rendered from the collection's slug template.

    Returns None if the collection does not exist. Raises SlugTemplateError
    if the template cannot be rendered.
    """
    coll = get_collection(collection)
    if coll is None:
        return None

    slug_config = get_config()["slug"]
    replacement = slug_config["sanitize_replacement"]
    encoding = slug_config["encoding"]
    now = datetime.now(timezone.utc)
    context = build_slug_context(
        title, data, now, replacement=replacement, encoding=encoding
    )
    base_slug = render_slug(
        coll.get("slug_template", DEFAULT_SLUG_TEMPLATE),
        context,
        replacement=replacement,
        encoding=encoding,
    ) or "untitled"

    _entries_dir(collection).mkdir(parents=True, exist_ok=True)
    target_slug = base_slug
    counter = 2
    while _entry_path(collection, target_slug).exists():
        target_slug = f"{base_slug}{replacement or '-'}{counter}"
        counter += 1

    entry = {
        "title": title,
        "slug": target_slug,
        "collection": collection,
        "body": body,
        "data": data or {},
        "created_at": now.isoformat(),
        "updated_at": now.isoformat(),
    }
    _entry_path(collection, target_slug).write_text(
        json.dumps(entry, indent=2, ensure_ascii=False)
    )
    logger.debug(f"Created entry {collection}/{target_slug}")
    return entry


def update_entry(collection: str, slug: str, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Update mutable entry fields (title, body, data). The slug is kept."""
    entry = get_entry(collection, slug)
    if entry is None:
        return None
    allowed = {"title", "body", "data"}
    for key, value in fields.items():
        if key in allowed:
            entry[key] = value
    entry["updated_at"] = datetime.now(timezone.utc).isoformat()
    _entry_path(collection, slug).write_text(
        json.dumps(entry, indent=2, ensure_ascii=False)
    )
    return entry


def delete_entry(collection: str, slug: str) -> bool:
    path = _find_entry(collection, slug)
    if path is None:
        return False
    path.unlink()
    logger.debug(f"Deleted entry {collection}/{slug}")
    return True
