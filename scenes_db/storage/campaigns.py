"""Campaign registry (grouped mode only).

Campaigns are append-only scopes: created explicitly, never auto-created by
a scene operation, and never deleted.
"""

import logging

from scenes_db.errors import DuplicateCampaignError, SceneValidationError, StorageModeError

from .core import is_grouped, load_document, normalize_name, save_document

logger = logging.getLogger(__name__)


def _require_grouped() -> None:
    if not is_grouped():
        raise StorageModeError("Campaigns are not enabled in flat mode")


def campaign_exists(name: str) -> bool:
    _require_grouped()
    return normalize_name(name) in load_document()


def list_campaigns() -> list[str]:
    _require_grouped()
    return list(load_document())


def create_campaign(name: str) -> dict[str, str]:
    """Insert an empty campaign under the normalized name and persist."""
    _require_grouped()
    key = normalize_name(name)
    if not key:
        raise SceneValidationError("Invalid campaign name: must not be blank")
    if campaign_exists(name):
        raise DuplicateCampaignError(f'Campaign named "{name}" already exists')
    document = load_document()
    document[key] = []
    save_document(document)
    logger.info("Created campaign %s", key)
    return {"campaignName": key}
