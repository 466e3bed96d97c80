"""Collection CRUD operations (merged presets + user data, copy-on-write)."""

import json
import logging
import shutil
from datetime import datetime, timezone
from typing import Any

from slugstore.slug_templates import DEFAULT_SLUG_TEMPLATE

from .core import collections_dir, is_path_part, preset_collections_dir, slugify

logger = logging.getLogger(__name__)


def list_collections() -> list[dict[str, Any]]:
    by_name: dict[str, dict[str, Any]] = {}
    # Presets first (lower priority)
    if preset_collections_dir().is_dir():
        for path in sorted(preset_collections_dir().glob("*.json")):
            try:
                data = json.loads(path.read_text())
            except json.JSONDecodeError as e:
                logger.warning(f"Skipping malformed preset collection {path.name}: {e}")
                continue
            data["name"] = path.stem
            data["source"] = "preset"
            by_name[path.stem] = data
    # User collections override
    for path in sorted(collections_dir().glob("*.json")):
        data = json.loads(path.read_text())
        data["source"] = "user"
        by_name[path.stem] = data
    return list(by_name.values())


def get_collection(name: str) -> dict[str, Any] | None:
    if not is_path_part(name):
        return None
    # Data dir first
    user_path = collections_dir() / f"{name}.json"
    if user_path.is_file():
        data = json.loads(user_path.read_text())
        data["source"] = "user"
        return data
    # Preset fallback
    preset_path = preset_collections_dir() / f"{name}.json"
    if preset_path.is_file():
        try:
            data = json.loads(preset_path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping malformed preset collection {preset_path.name}: {e}")
            return None
        data["name"] = name
        data["source"] = "preset"
        return data
    return None


def create_collection(
    label: str, description: str = "", slug_template: str = DEFAULT_SLUG_TEMPLATE
) -> dict[str, Any]:
    name = slugify(label)
    json_path = collections_dir() / f"{name}.json"
    # Check collision in both data and presets
    if json_path.exists():
        raise FileExistsError(f"Collection '{label}' already exists (name: {name})")
    if (preset_collections_dir() / f"{name}.json").is_file():
        raise FileExistsError(f"Collection '{label}' already exists as preset (name: {name})")
    collection = {
        "label": label,
        "name": name,
        "description": description,
        "slug_template": slug_template,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    json_path.write_text(json.dumps(collection, indent=2, ensure_ascii=False))
    (collections_dir() / name).mkdir(exist_ok=True)
    logger.debug(f"Created collection {name}")
    collection["source"] = "user"
    return collection


def update_collection(name: str, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Update label, description or slug_template. The name never changes,
    since existing entry URLs are built from it."""
    collection = get_collection(name)
    if collection is None:
        return None

    allowed = {"label", "description", "slug_template"}
    for key, value in fields.items():
        if key in allowed:
            collection[key] = value
    collection.setdefault("created_at", datetime.now(timezone.utc).isoformat())

    # Copy-on-write: presets are written to data on first update
    save_data = {k: v for k, v in collection.items() if k != "source"}
    (collections_dir() / f"{name}.json").write_text(
        json.dumps(save_data, indent=2, ensure_ascii=False)
    )
    (collections_dir() / name).mkdir(exist_ok=True)
    collection["source"] = "user"
    return collection


def delete_collection(name: str) -> bool:
    """Delete user data for a collection, including its entries.

    A preset with the same name becomes visible again.
    """
    if not is_path_part(name):
        return False
    json_path = collections_dir() / f"{name}.json"
    if not json_path.is_file():
        return False
    json_path.unlink()
    child_dir = collections_dir() / name
    if child_dir.is_dir():
        shutil.rmtree(child_dir)
    logger.debug(f"Deleted collection {name}")
    return True
