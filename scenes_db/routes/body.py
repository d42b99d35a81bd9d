"""Request body and error helpers shared by the routers."""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from scenes_db.errors import SceneStoreError, SceneValidationError

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> Any:
    """Parse the raw body so malformed JSON is a 400, not FastAPI's 422."""
    try:
        return await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise SceneValidationError("Invalid request: body is not valid JSON") from e


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """400 {"error": message} for any failure of a mutating request."""
    if isinstance(exc, SceneStoreError):
        message = exc.message
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    else:
        message = str(exc) or SceneStoreError.default_message
        logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse({"error": message}, status_code=400)
