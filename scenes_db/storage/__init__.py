"""File-based JSON storage for scenes, optionally grouped into campaigns.

Data layout:
  <SCENES_DB_DIR>/
    scenes.json          The whole document, pretty-printed

Document shape depends on mode:
  flat     [scene, ...]                      sorted by name
  grouped  {"CAMPAIGN": [scene, ...], ...}   each list sorted by name

A scene is {"id": uuid4, "name": NORMALIZED, ...payload}. Names are stored
normalized (trimmed, uppercased) and are unique within their scope.

There is no in-memory cache: every operation reads the file, mutates the
document in memory, and rewrites the whole file. Concurrent writers from
separate processes are not coordinated; the last write wins.
"""

# Re-export all public symbols so `from scenes_db import storage` keeps working.

from .core import (  # noqa: F401
    DB_FILENAME,
    data_dir,
    db_path,
    init_storage,
    is_grouped,
    load_document,
    normalize_name,
    save_document,
    storage_mode,
)

from .validation import (  # noqa: F401
    describe_validation_error,
    parse_body,
    validate_scene,
)

from .scenes import (  # noqa: F401
    add_scene,
    get_scene,
    list_scenes,
    remove_scene,
)

from .campaigns import (  # noqa: F401
    campaign_exists,
    create_campaign,
    list_campaigns,
)
