"""Health check, settings, and slug preview endpoints."""

from fastapi import APIRouter, HTTPException

from slugstore import storage
from slugstore.slugs import ENCODINGS, sanitize_slug

from .models import SlugPreviewBody

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get global settings (slug encoding/replacement, hash routing)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: dict):
    """Update global settings (partial merge)."""
    try:
        return storage.update_config(body)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("/slugs/preview")
async def preview_slug(body: SlugPreviewBody):
    """Show what a piece of text becomes, falling back to the configured slug settings."""
    slug_config = storage.get_config()["slug"]
    replacement = body.replacement
    if replacement is None:
        replacement = slug_config["sanitize_replacement"]
    encoding = body.encoding or slug_config["encoding"]
    sanitize_chars = ENCODINGS[encoding]
    try:
        return {
            "iri": sanitize_chars(body.text, replacement),
            "slug": sanitize_slug(body.text, replacement, encoding=encoding),
        }
    except ValueError as e:
        raise HTTPException(400, str(e))
