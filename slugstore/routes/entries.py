"""Entry CRUD endpoints, nested under a collection."""

from typing import Any

from fastapi import APIRouter, HTTPException

from slugstore import storage
from slugstore.slug_templates import SlugTemplateError
from slugstore.urls import get_entry_url

from .models import CreateEntry, UpdateEntry

router = APIRouter()


def _with_url(entry: dict[str, Any], name: str) -> dict[str, Any]:
    direct = storage.get_config()["hash_routing"]
    return {**entry, "url": get_entry_url(name, entry["slug"], direct)}


@router.get("/collections/{name}/entries")
async def list_entries(name: str):
    """List all entries of a collection."""
    entries = storage.list_entries(name)
    if entries is None:
        raise HTTPException(404, "Collection not found")
    return [_with_url(e, name) for e in entries]


@router.post("/collections/{name}/entries", status_code=201)
async def create_entry(name: str, body: CreateEntry):
    """Create an entry; its slug is rendered from the collection's slug template."""
    try:
        entry = storage.create_entry(name, body.title, body.body, body.data)
    except SlugTemplateError as e:
        raise HTTPException(400, str(e))
    if not entry:
        raise HTTPException(404, "Collection not found")
    return _with_url(entry, name)


@router.get("/collections/{name}/entries/{slug}")
async def get_entry(name: str, slug: str):
    """Get a single entry by slug."""
    entry = storage.get_entry(name, slug)
    if not entry:
        raise HTTPException(404, "Entry not found")
    return _with_url(entry, name)


@router.patch("/collections/{name}/entries/{slug}")
async def update_entry(name: str, slug: str, body: UpdateEntry):
    """Update entry fields (title, body, data). The slug does not change."""
    updated = storage.update_entry(name, slug, body.model_dump(exclude_none=True))
    if not updated:
        raise HTTPException(404, "Entry not found")
    return _with_url(updated, name)


@router.delete("/collections/{name}/entries/{slug}")
async def delete_entry(name: str, slug: str):
    """Delete a single entry."""
    if not storage.delete_entry(name, slug):
        raise HTTPException(404, "Entry not found")
    return {"ok": True}
