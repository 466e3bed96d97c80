"""Collection CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException

from slugstore import storage
from slugstore.urls import get_collection_url, get_new_entry_url

from .models import CreateCollection, UpdateCollection

router = APIRouter()


def with_urls(collection: dict[str, Any]) -> dict[str, Any]:
    direct = storage.get_config()["hash_routing"]
    return {
        **collection,
        "url": get_collection_url(collection["name"], direct),
        "new_entry_url": get_new_entry_url(collection["name"], direct),
    }


@router.get("/collections")
async def list_collections():
    """List all collections (presets merged with user-created)."""
    return [with_urls(c) for c in storage.list_collections()]


@router.post("/collections", status_code=201)
async def create_collection(body: CreateCollection):
    """Create a new collection named after the slug of its label."""
    try:
        collection = storage.create_collection(body.label, body.description, body.slug_template)
    except FileExistsError as e:
        raise HTTPException(409, str(e))
    return with_urls(collection)


@router.get("/collections/{name}")
async def get_collection(name: str):
    """Get a single collection by name."""
    collection = storage.get_collection(name)
    if not collection:
        raise HTTPException(404, "Collection not found")
    return with_urls(collection)


@router.patch("/collections/{name}")
async def update_collection(name: str, body: UpdateCollection):
    """Update collection fields (label, description, slug_template)."""
    updated = storage.update_collection(name, body.model_dump(exclude_none=True))
    if not updated:
        raise HTTPException(404, "Collection not found")
    return with_urls(updated)


@router.delete("/collections/{name}")
async def delete_collection(name: str):
    """Delete a collection and its entries (or remove user override to reveal preset)."""
    if not storage.delete_collection(name):
        raise HTTPException(404, "Collection not found")
    return {"ok": True}
