"""Scene validation: shape, content rule, then uniqueness within a scope.

The first failing check raises; nothing is returned on failure. On success
the result is the sanitized on-disk record minus its id.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError

from scenes_db.errors import DuplicateNameError, SceneValidationError
from scenes_db.models import RichScenePayload, SimpleScenePayload

from .core import normalize_name


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of the first pydantic error, e.g. "playlist.repeat: Input should be ..."."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


def parse_body(model: type[BaseModel], body: Any) -> Any:
    """Validate a JSON body against model, raising SceneValidationError."""
    if not isinstance(body, dict):
        raise SceneValidationError("Invalid request: expected a JSON object")
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise SceneValidationError(f"Invalid request: {describe_validation_error(e)}") from e


def validate_scene(
    candidate: Any,
    existing: Iterable[dict[str, Any]] = (),
    *,
    strict: bool,
) -> dict[str, Any]:
    """Validate candidate against the rich (strict) or simple (permissive) shape.

    existing is the scope the name must be unique in. Returns a record with the
    name normalized, unset optionals omitted, and unknown fields dropped.
    """
    if not isinstance(candidate, dict):
        raise SceneValidationError("Invalid Scene: expected a JSON object")

    model = RichScenePayload if strict else SimpleScenePayload
    try:
        payload = model.model_validate(candidate)
    except ValidationError as e:
        raise SceneValidationError(f"Invalid Scene: {describe_validation_error(e)}") from e

    if not payload.has_content():
        fields = ", ".join(model.model_fields[f].alias or f for f in model.payload_fields)
        raise SceneValidationError(f"Invalid Scene: empty scene, set at least one of {fields}")

    name = normalize_name(payload.name)
    if any(normalize_name(scene["name"]) == name for scene in existing):
        raise DuplicateNameError(f'Scene named "{name}" already exists')

    record = payload.to_json_dict()
    record["name"] = name
    return record
