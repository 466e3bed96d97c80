"""Tests for demo data creation."""

import re

from slugstore import storage
from slugstore.demo import create_demo_data


def test_create_demo_data():
    storage.create_collection("Leftover")
    create_demo_data()

    names = {c["name"] for c in storage.list_collections()}
    assert names == {"blog-posts", "translations", "pages"}

    slugs = [e["slug"] for e in storage.list_entries("blog-posts")]
    assert len(slugs) == 3
    assert all(re.match(r"\d{4}-\d{2}-\d{2}-", s) for s in slugs)
    assert any(s.endswith("-日本語のタイトル") for s in slugs)
    assert any(s.endswith("-café-münch-a-review") for s in slugs)

    slugs = {e["slug"] for e in storage.list_entries("translations")}
    assert slugs == {"de-über-uns", "fr-qui-sommes-nous", "en-🎉-party-page"}
