"""File-based JSON storage using a tree of slug-named objects.

Data layout:
  data/
    config.json            Slug settings (encoding, sanitize_replacement) + hash_routing
    collections/
      <name>.json          Collection metadata (label, description, slug_template)
      <name>/              Entries:
        <slug>.json        title, body, data, created_at, updated_at
  presets/
    collections/           Built-in read-only collections (merged at read time)

Slug rules: title → strip + lowercase → drop quotes → IRI filter (or ASCII
filter) → filename filter → collapse replacement runs → strip trailing
replacement. No Unicode normalization: "Café" stays "café".

Preset merging: list_collections() and get_collection() merge preset + user
data; user data wins on name collision. Copy-on-write: updating a preset
copies it to data/collections/ first. Deleting a user override reveals the
preset.

Entry slugs come from the collection's Handlebars slug_template
("{{slug}}" by default). Colliding slugs get "-2", "-3", ... appended.
"""

# Re-export all public symbols so `from slugstore import storage` keeps working.

from .core import (  # noqa: F401
    collections_dir,
    data_dir,
    init_storage,
    preset_collections_dir,
    presets_dir,
    slugify,
)

from .collections import (  # noqa: F401
    create_collection,
    delete_collection,
    get_collection,
    list_collections,
    update_collection,
)

from .entries import (  # noqa: F401
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    update_entry,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
