"""Tests for the campaign registry and campaign-scoped scenes."""

import json

import pytest

from scenes_db import storage
from scenes_db.errors import (
    DuplicateCampaignError,
    DuplicateNameError,
    SceneValidationError,
    StorageModeError,
    UnknownCampaignError,
    UnknownSceneError,
)

PLAYLIST = {"id": "pl-1", "title": "Battle", "repeat": "track", "shuffle": False}


# ── Registry ─────────────────────────────────────────────


def test_create_campaign(grouped):
    assert storage.create_campaign(" raid ") == {"campaignName": "RAID"}
    assert storage.list_scenes() == {"RAID": []}
    assert storage.campaign_exists("Raid")


def test_create_campaign_twice(grouped):
    storage.create_campaign("raid")
    with pytest.raises(DuplicateCampaignError, match="already exists"):
        storage.create_campaign("RAID ")


def test_create_blank_campaign(grouped):
    with pytest.raises(SceneValidationError):
        storage.create_campaign("   ")
    assert storage.list_scenes() == {}


def test_campaign_exists_false(grouped):
    assert storage.campaign_exists("nope") is False


def test_list_campaigns_in_creation_order(grouped):
    for name in ["zeta", "alpha"]:
        storage.create_campaign(name)
    assert storage.list_campaigns() == ["ZETA", "ALPHA"]


def test_create_campaign_propagates_read_errors(grouped):
    """A corrupt document is an error, never a missing campaign."""
    storage.db_path().write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        storage.create_campaign("raid")
    assert storage.db_path().read_text() == "{not json"


def test_campaigns_unavailable_in_flat_mode():
    with pytest.raises(StorageModeError):
        storage.create_campaign("raid")
    with pytest.raises(StorageModeError):
        storage.campaign_exists("raid")


# ── Scenes within campaigns ──────────────────────────────


def test_add_scene_to_unknown_campaign(grouped):
    with pytest.raises(UnknownCampaignError, match="unknown"):
        storage.add_scene({"name": "x", "playlist": PLAYLIST}, "unknown")
    assert storage.list_scenes() == {}


def test_add_scene_requires_campaign(grouped):
    storage.create_campaign("raid")
    with pytest.raises(StorageModeError):
        storage.add_scene({"name": "x", "playlist": PLAYLIST})


def test_add_scene_to_campaign(grouped):
    storage.create_campaign("raid")
    scene = storage.add_scene({"name": "boss fight", "playlist": PLAYLIST}, " Raid")
    assert scene["name"] == "BOSS FIGHT"
    assert scene["playlist"] == PLAYLIST
    assert storage.list_scenes() == {"RAID": [scene]}
    assert storage.get_scene(scene["id"], "raid") == scene


def test_campaign_lists_sorted_independently(grouped):
    storage.create_campaign("raid")
    storage.create_campaign("town")
    for name in ["wipe", "pull", "loot"]:
        storage.add_scene({"name": name, "obsScene": "Main"}, "raid")
    storage.add_scene({"name": "market", "obsScene": "Main"}, "town")
    document = storage.list_scenes()
    assert [s["name"] for s in document["RAID"]] == ["LOOT", "PULL", "WIPE"]
    assert [s["name"] for s in document["TOWN"]] == ["MARKET"]


def test_same_name_allowed_across_campaigns(grouped):
    storage.create_campaign("raid")
    storage.create_campaign("town")
    storage.add_scene({"name": "intro", "obsScene": "A"}, "raid")
    storage.add_scene({"name": "intro", "obsScene": "B"}, "town")
    with pytest.raises(DuplicateNameError):
        storage.add_scene({"name": "Intro ", "obsScene": "C"}, "raid")


def test_grouped_mode_is_strict(grouped):
    storage.create_campaign("raid")
    with pytest.raises(SceneValidationError):
        storage.add_scene({"name": "x", "playlistId": "p1"}, "raid")


def test_remove_scene_from_campaign(grouped):
    storage.create_campaign("raid")
    scene = storage.add_scene({"name": "x", "lights": {"sceneId": "blue", "transitionSpeed": "slow"}}, "raid")
    storage.remove_scene(scene["id"], "raid")
    assert storage.list_scenes() == {"RAID": []}
    with pytest.raises(UnknownSceneError):
        storage.remove_scene(scene["id"], "raid")


def test_remove_scene_wrong_campaign(grouped):
    storage.create_campaign("raid")
    storage.create_campaign("town")
    scene = storage.add_scene({"name": "x", "obsScene": "A"}, "raid")
    with pytest.raises(UnknownSceneError):
        storage.remove_scene(scene["id"], "town")
    with pytest.raises(UnknownCampaignError):
        storage.remove_scene(scene["id"], "dungeon")
