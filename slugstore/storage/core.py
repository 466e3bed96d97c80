"""Storage initialization, path helpers, and slug utilities."""

from pathlib import Path
from typing import Any

from slugstore.slug_templates import prepare_slug
from slugstore.slugs import sanitize_slug

_data_dir: Path | None = None
_presets_dir: Path | None = None


def slugify(title: str, slug_config: dict[str, Any] | None = None) -> str:
    """Convert a title to an IRI- and filesystem-safe slug.

    "Café Münch, 2nd floor" → "café-münch-2nd-floor"
    """
    if slug_config is None:
        from .config import get_config

        slug_config = get_config()["slug"]
    slug = sanitize_slug(
        prepare_slug(title),
        slug_config["sanitize_replacement"],
        encoding=slug_config["encoding"],
    )
    return slug or "untitled"


def is_path_part(name: str) -> bool:
    """True if name is a single file name: no separators, not "." or ".."."""
    return bool(name) and name not in {".", ".."} and Path(name).name == name


def init_storage(data_dir: Path, presets_dir: Path | None = None) -> None:
    global _data_dir, _presets_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    collections_dir().mkdir(exist_ok=True)
    if presets_dir is None:
        # Default: repo_root/presets
        presets_dir = Path(__file__).parent.parent.parent / "presets"
    _presets_dir = presets_dir


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def presets_dir() -> Path:
    assert _presets_dir is not None, "Call init_storage() before using storage"
    return _presets_dir


def collections_dir() -> Path:
    return data_dir() / "collections"


def preset_collections_dir() -> Path:
    return presets_dir() / "collections"
