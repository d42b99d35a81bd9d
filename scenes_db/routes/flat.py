"""Flat-mode endpoints: one store-wide scene list."""

from fastapi import APIRouter, Depends, Request

from scenes_db import storage

from .body import error_response, read_json_body
from .limiter import rate_limit

router = APIRouter()


@router.get("/")
async def list_scenes():
    """List all scenes, sorted by name."""
    return storage.list_scenes()


@router.post("/", dependencies=[Depends(rate_limit)])
async def create_scene(request: Request):
    """Create a scene from the request body."""
    try:
        return storage.add_scene(await read_json_body(request))
    except Exception as e:
        return error_response(request, e)


@router.delete("/{scene_id}", dependencies=[Depends(rate_limit)])
async def delete_scene(scene_id: str, request: Request):
    """Remove a scene by id."""
    try:
        storage.remove_scene(scene_id)
    except Exception as e:
        return error_response(request, e)
    return {}
