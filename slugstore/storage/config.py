"""Global slug and routing configuration."""

import json
from pathlib import Path
from typing import Any

from slugstore.slugs import ENCODINGS

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "slug": {
        "encoding": "unicode",
        "sanitize_replacement": "-",
    },
    "hash_routing": False,
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def _validate_slug_config(slug: dict[str, Any]) -> None:
    sanitize_chars = ENCODINGS.get(str(slug["encoding"]))
    if sanitize_chars is None:
        raise ValueError(f"Unknown slug encoding: {slug['encoding']!r}")
    # The sanitizer checks its replacement before touching the input.
    try:
        sanitize_chars("", slug["sanitize_replacement"])
    except TypeError as e:
        raise ValueError(str(e)) from e


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = {
        "slug": dict(_CONFIG_DEFAULTS["slug"]),
        "hash_routing": _CONFIG_DEFAULTS["hash_routing"],
    }
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        if isinstance(stored.get("slug"), dict):
            config["slug"].update(stored["slug"])
        if "hash_routing" in stored:
            config["hash_routing"] = bool(stored["hash_routing"])
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config.

    Raises ValueError (and persists nothing) for an unknown slug encoding or
    a replacement that is not itself IRI-safe.
    """
    config = get_config()
    if "slug" in fields:
        if not isinstance(fields["slug"], dict):
            raise ValueError("`slug` must be an object.")
        allowed = {"encoding", "sanitize_replacement"}
        config["slug"].update({k: v for k, v in fields["slug"].items() if k in allowed})
        _validate_slug_config(config["slug"])
    if "hash_routing" in fields:
        config["hash_routing"] = bool(fields["hash_routing"])
    _config_path().write_text(json.dumps(config, indent=2, ensure_ascii=False))
    return config
