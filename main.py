"""Scenes DB dev launcher. Starts the API server."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "5003")


def main():
    parser = argparse.ArgumentParser(description="Scenes DB server")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory holding scenes.json (default: $SCENES_DB_DIR)")
    parser.add_argument("--mode", choices=["flat", "grouped"], default=None,
                        help="Store layout (default: $SCENES_DB_MODE or flat)")
    parser.add_argument("--port", type=int, default=int(PORT))
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Settings are read from the environment inside the app factory
    if args.data_dir:
        os.environ["SCENES_DB_DIR"] = str(args.data_dir.resolve())
    if args.mode:
        os.environ["SCENES_DB_MODE"] = args.mode

    logging.getLogger(__name__).info("Running on port %s", args.port)
    uvicorn.run("scenes_db.app:create_app", factory=True, host=HOST, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
