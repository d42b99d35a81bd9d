"""Application factory.

Run with `uvicorn scenes_db.app:create_app --factory` or via main.py.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scenes_db import storage
from scenes_db.config import Settings
from scenes_db.routes import RateLimiter, router_for

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    storage.init_storage(settings.data_dir, grouped=settings.grouped)

    app = FastAPI(title="Scenes DB")
    app.state.settings = settings
    app.state.rate_limiter = RateLimiter(settings.rate_limit_max, settings.rate_limit_window)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router_for(settings.grouped))

    logger.info("Scenes stored in %s (%s mode)", storage.db_path(), storage.storage_mode())
    return app
