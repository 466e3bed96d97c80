"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, settings, slug preview), collections,
and entries. Each collection's entries are nested under
/api/collections/{name}/entries.

Collection and entry payloads carry admin UI links (``url``,
``new_entry_url``); the ``hash_routing`` setting decides whether they are
hash-routed.
"""

from fastapi import APIRouter

from .collections import router as collections_router
from .entries import router as entries_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(collections_router)
router.include_router(entries_router)
