"""Grouped-mode endpoints: scenes nested under named campaigns."""

from fastapi import APIRouter, Depends, Request

from scenes_db import storage
from scenes_db.models import CreateCampaign

from .body import error_response, read_json_body
from .limiter import rate_limit

router = APIRouter()


@router.get("/")
async def list_campaign_scenes():
    """List every campaign with its scenes."""
    return storage.list_scenes()


@router.post("/", dependencies=[Depends(rate_limit)])
async def create_campaign(request: Request):
    """Create an empty campaign. Body: {"campaignName": ...}."""
    try:
        body = storage.parse_body(CreateCampaign, await read_json_body(request))
        return storage.create_campaign(body.campaign_name)
    except Exception as e:
        return error_response(request, e)


@router.post("/{campaign_name}", dependencies=[Depends(rate_limit)])
async def create_scene(campaign_name: str, request: Request):
    """Create a scene in an existing campaign."""
    try:
        return storage.add_scene(await read_json_body(request), campaign_name)
    except Exception as e:
        return error_response(request, e)


@router.delete("/{campaign_name}/{scene_id}", dependencies=[Depends(rate_limit)])
async def delete_scene(campaign_name: str, scene_id: str, request: Request):
    """Remove a scene from a campaign."""
    try:
        storage.remove_scene(scene_id, campaign_name)
    except Exception as e:
        return error_response(request, e)
    return {}
