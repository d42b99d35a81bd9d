"""Storage initialization, document I/O, and name normalization."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DB_FILENAME = "scenes.json"

_data_dir: Path | None = None
_grouped: bool = False


def normalize_name(name: str) -> str:
    """Canonical form used for storage and comparison.

    "  zone 1 " → "ZONE 1"
    """
    return name.strip().upper()


def init_storage(data_dir: Path, grouped: bool = False) -> None:
    """Point storage at data_dir and bootstrap an empty document if missing."""
    global _data_dir, _grouped

    _data_dir = data_dir
    _grouped = grouped
    _data_dir.mkdir(parents=True, exist_ok=True)
    path = db_path()
    if not path.exists():
        logger.info("Bootstrapping empty %s document at %s", storage_mode(), path)
        save_document(_empty_document())


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def db_path() -> Path:
    return data_dir() / DB_FILENAME


def is_grouped() -> bool:
    return _grouped


def storage_mode() -> str:
    return "grouped" if _grouped else "flat"


def _empty_document() -> dict[str, list] | list:
    return {} if _grouped else []


def load_document() -> Any:
    """Read the whole document from disk. Never cached between calls."""
    return json.loads(db_path().read_text(encoding="utf-8"))


def save_document(document: Any) -> None:
    """Replace the whole document on disk, pretty-printed.

    Written to a sibling temp file first and swapped in, so readers see either
    the old or the new document. There is no lock: concurrent writers from
    separate processes race and the last one wins.
    """
    path = db_path()
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    tmp_path.replace(path)


def sort_scenes(scenes: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(scenes, key=lambda scene: normalize_name(scene["name"]))
