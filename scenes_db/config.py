"""Service settings, read from the environment (and .env via python-dotenv)."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel

from scenes_db.errors import MissingConfigurationError

ENV_FILE = Path(__file__).parent.parent / ".env"


class Settings(BaseModel):
    data_dir: Path
    mode: Literal["flat", "grouped"] = "flat"
    rate_limit_window: float = 1.0
    rate_limit_max: int = 1
    cors_origins: list[str] = ["*"]

    @property
    def grouped(self) -> bool:
        return self.mode == "grouped"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(ENV_FILE)
        data_dir = os.getenv("SCENES_DB_DIR")
        if not data_dir:
            raise MissingConfigurationError("SCENES_DB_DIR not set")
        origins = [o.strip() for o in os.getenv("SCENES_DB_CORS_ORIGINS", "*").split(",") if o.strip()]
        return cls(
            data_dir=Path(data_dir),
            mode=os.getenv("SCENES_DB_MODE", "flat"),
            rate_limit_window=os.getenv("SCENES_DB_RATE_LIMIT_WINDOW", "1.0"),
            rate_limit_max=os.getenv("SCENES_DB_RATE_LIMIT_MAX", "1"),
            cors_origins=origins or ["*"],
        )
