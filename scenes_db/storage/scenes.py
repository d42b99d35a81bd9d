"""Scene repository: list, add, remove.

Every call is a full load → mutate → save cycle against the document on
disk. The scope is the whole store in flat mode, or one campaign's list in
grouped mode.
"""

import logging
import uuid
from typing import Any

from scenes_db.errors import StorageModeError, UnknownCampaignError, UnknownSceneError

from .core import is_grouped, load_document, normalize_name, save_document, sort_scenes
from .validation import validate_scene

logger = logging.getLogger(__name__)


def _resolve_scope(document: Any, campaign_name: str | None) -> tuple[str | None, list[dict[str, Any]]]:
    """Return (campaign key, scenes) for the configured mode. Key is None in flat mode."""
    if not is_grouped():
        if campaign_name is not None:
            raise StorageModeError("Campaigns are not enabled in flat mode")
        return None, document
    if campaign_name is None:
        raise StorageModeError("A campaign name is required in grouped mode")
    key = normalize_name(campaign_name)
    if key not in document:
        raise UnknownCampaignError(f"Invalid campaign: {campaign_name}")
    return key, document[key]


def _store_scope(document: Any, key: str | None, scenes: list[dict[str, Any]]) -> None:
    scenes = sort_scenes(scenes)
    if key is None:
        document = scenes
    else:
        document[key] = scenes
    save_document(document)


def list_scenes() -> Any:
    """The whole document as stored: a list (flat) or campaign → list (grouped)."""
    return load_document()


def get_scene(scene_id: str, campaign_name: str | None = None) -> dict[str, Any] | None:
    _, scenes = _resolve_scope(load_document(), campaign_name)
    for scene in scenes:
        if scene["id"] == scene_id:
            return scene
    return None


def add_scene(candidate: Any, campaign_name: str | None = None) -> dict[str, Any]:
    """Validate candidate, assign an id, and persist it in its scope."""
    document = load_document()
    key, scenes = _resolve_scope(document, campaign_name)
    record = validate_scene(candidate, scenes, strict=is_grouped())
    scene = {"id": str(uuid.uuid4()), **record}
    _store_scope(document, key, [*scenes, scene])
    logger.info("Added scene %s (%s) to %s", scene["name"], scene["id"], key or "store")
    return scene


def remove_scene(scene_id: str, campaign_name: str | None = None) -> None:
    document = load_document()
    key, scenes = _resolve_scope(document, campaign_name)
    remaining = [scene for scene in scenes if scene["id"] != scene_id]
    if len(remaining) == len(scenes):
        raise UnknownSceneError(f"Invalid scene id: {scene_id}")
    _store_scope(document, key, remaining)
    logger.info("Removed scene %s from %s", scene_id, key or "store")
