"""FastAPI endpoints mounted at the root.

Flat mode:
  GET    /                             whole document
  POST   /                             create scene
  DELETE /{scene_id}                   remove scene

Grouped mode:
  GET    /                             whole document
  POST   /                             create campaign
  POST   /{campaign_name}              create scene in campaign
  DELETE /{campaign_name}/{scene_id}   remove scene from campaign

Mutating routes are rate limited (429 when throttled). Any error raised while
handling a mutating route becomes 400 {"error": message}; reads are not
translated.
"""

from fastapi import APIRouter

from .flat import router as flat_router
from .grouped import router as grouped_router
from .limiter import RateLimiter  # noqa: F401


def router_for(grouped: bool) -> APIRouter:
    return grouped_router if grouped else flat_router
