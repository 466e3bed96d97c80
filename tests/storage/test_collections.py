"""Tests for collection CRUD and preset merging."""

import logging

import pytest

from slugstore import storage


# ── Create & List ────────────────────────────────────────


def test_create_and_list_collection():
    coll = storage.create_collection("Blog Posts", "Articles")
    assert coll["label"] == "Blog Posts"
    assert coll["name"] == "blog-posts"
    assert coll["slug_template"] == "{{slug}}"
    assert coll["source"] == "user"

    names = [c["name"] for c in storage.list_collections()]
    assert "blog-posts" in names


def test_create_collection_unicode_name():
    coll = storage.create_collection("Новости дня")
    assert coll["name"] == "новости-дня"
    assert storage.get_collection("новости-дня") is not None


def test_create_collection_custom_template():
    coll = storage.create_collection("Posts", slug_template="{{year}}-{{slug}}")
    assert storage.get_collection(coll["name"])["slug_template"] == "{{year}}-{{slug}}"


def test_create_collection_collision():
    storage.create_collection("Posts")
    with pytest.raises(FileExistsError):
        storage.create_collection("posts!")


def test_create_collection_preset_collision():
    """Cannot create a collection whose name collides with a preset."""
    with pytest.raises(FileExistsError):
        storage.create_collection("Pages")


# ── Preset merging ───────────────────────────────────────


def test_list_includes_preset():
    names = [c["name"] for c in storage.list_collections()]
    assert "pages" in names


def test_preset_source_field():
    coll = storage.get_collection("pages")
    assert coll is not None
    assert coll["source"] == "preset"
    assert coll["name"] == "pages"


def test_user_override_wins():
    storage.update_collection("pages", {"description": "Overridden"})
    coll = storage.get_collection("pages")
    assert coll["source"] == "user"
    assert coll["description"] == "Overridden"
    listed = [c for c in storage.list_collections() if c["name"] == "pages"]
    assert len(listed) == 1
    assert listed[0]["source"] == "user"


def test_delete_reveals_preset():
    storage.update_collection("pages", {"description": "Overridden"})
    assert storage.delete_collection("pages") is True
    coll = storage.get_collection("pages")
    assert coll is not None
    assert coll["source"] == "preset"


def test_malformed_preset_skipped(tmp_path, caplog):
    (tmp_path / "collections").mkdir()
    (tmp_path / "collections" / "broken.json").write_text("{not json")
    storage.init_storage(storage.data_dir(), presets_dir=tmp_path)
    with caplog.at_level(logging.WARNING):
        assert storage.list_collections() == []
        assert storage.get_collection("broken") is None
    assert "broken.json" in caplog.text


# ── Get / Update / Delete ────────────────────────────────


def test_get_collection_missing():
    assert storage.get_collection("nonexistent") is None


def test_update_collection():
    storage.create_collection("Posts")
    updated = storage.update_collection(
        "posts", {"label": "Articles", "slug_template": "{{year}}-{{slug}}"}
    )
    assert updated["label"] == "Articles"
    assert updated["slug_template"] == "{{year}}-{{slug}}"
    # The name is stable even when the label changes
    assert updated["name"] == "posts"
    assert storage.get_collection("articles") is None


def test_update_ignores_unknown_fields():
    storage.create_collection("Posts")
    updated = storage.update_collection("posts", {"name": "hacked"})
    assert updated["name"] == "posts"


def test_update_missing():
    assert storage.update_collection("nope", {"label": "X"}) is None


def test_delete_collection_removes_entries():
    storage.create_collection("Posts")
    storage.create_entry("posts", "Hello")
    assert storage.delete_collection("posts") is True
    assert storage.get_collection("posts") is None
    assert not (storage.collections_dir() / "posts").exists()


def test_delete_missing():
    assert storage.delete_collection("nope") is False


@pytest.mark.parametrize("name", ["..", ".", "", "a/b"])
def test_collection_access_rejects_bad_names(name):
    assert storage.get_collection(name) is None
    assert storage.update_collection(name, {"label": "x"}) is None
    assert storage.delete_collection(name) is False


def test_create_and_delete_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="slugstore.storage.collections"):
        storage.create_collection("Posts")
        storage.delete_collection("posts")
    assert "Created collection posts" in caplog.text
    assert "Deleted collection posts" in caplog.text
