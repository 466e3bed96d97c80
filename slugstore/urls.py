"""Admin UI path builders.

``direct=True`` builds a hash-routed link (``/#/collections/...``) that
works when opened directly rather than navigated to inside the app.
"""


def _get_url(path: str, direct: bool) -> str:
    return f"{'/#' if direct else ''}{path}"


def get_collection_url(collection_name: str, direct: bool = False) -> str:
    return _get_url(f"/collections/{collection_name}", direct)


def get_new_entry_url(collection_name: str, direct: bool = False) -> str:
    return _get_url(f"/collections/{collection_name}/entries/new", direct)


def get_entry_url(collection_name: str, slug: str, direct: bool = False) -> str:
    return _get_url(f"/collections/{collection_name}/entries/{slug}", direct)
