"""Create demo collections and entries for development/testing."""

import shutil

from slugstore import storage

DEMO_COLLECTIONS = [
    {
        "label": "Blog Posts",
        "description": "Dated articles. Slugs start with the publication date.",
        "slug_template": "{{year}}-{{month}}-{{day}}-{{slug}}",
        "entries": [
            {"title": "Hello, World!", "body": "First post."},
            {"title": "日本語のタイトル", "body": "Non-Latin titles keep their characters."},
            {"title": "Café Münch: a review", "body": "Accents are not stripped."},
        ],
    },
    {
        "label": "Translations",
        "description": "Localized pages, keyed by language.",
        "slug_template": "{{fields.lang}}-{{slug}}",
        "entries": [
            {"title": "Über uns", "data": {"lang": "de"}},
            {"title": "Qui sommes-nous ?", "data": {"lang": "fr"}},
            {"title": "🎉 Party page", "data": {"lang": "en"}},
        ],
    },
]


def create_demo_data() -> None:
    """Wipe existing collections and create fresh demo data."""
    if storage.collections_dir().exists():
        shutil.rmtree(storage.collections_dir())
    storage.collections_dir().mkdir(parents=True, exist_ok=True)

    for coll in DEMO_COLLECTIONS:
        c = storage.create_collection(coll["label"], coll["description"], coll["slug_template"])
        for entry in coll["entries"]:
            storage.create_entry(
                c["name"], entry["title"], entry.get("body", ""), entry.get("data")
            )
