"""Scene payload models.

Two payload shapes exist, selected by storage mode:

  - RichScenePayload (grouped mode): playlist, soundboards, discordMuteStatus,
    obsScene, lights. Strict: unknown fields at any level are rejected.
  - SimpleScenePayload (flat mode): playlistId, soundboardIds. Permissive:
    unknown top-level fields are accepted and dropped.

Field names are snake_case in Python and camelCase on disk and on the wire.
Every scalar is strictly typed, so "true" is not a boolean and 1 is not a
string. In the rich shape an explicit null is rejected; omit the field instead.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel

RepeatMode = Literal["playlist", "track", "off"]

Text100 = Annotated[str, Field(strict=True, min_length=1, max_length=100)]
Volume = Annotated[float, Field(strict=True, ge=0, le=1)]


def _reject_null(value):
    if value is None:
        raise ValueError("must not be null; omit the field instead")
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel)

    def to_json_dict(self) -> dict:
        """Wire/disk form: camelCase keys, unset optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PlaylistRef(_WireModel):
    id: Text100
    title: Text100
    repeat: RepeatMode
    shuffle: StrictBool
    muted: StrictBool | None = None
    volume: Volume | None = None

    @field_validator("muted", "volume", mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class SoundboardRef(_WireModel):
    id: Text100
    title: Text100
    loop: StrictBool
    volume: Volume | None = None

    @field_validator("volume", mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class DiscordMuteStatus(_WireModel):
    muted: StrictBool


class LightsRef(_WireModel):
    scene_id: StrictStr
    transition_speed: StrictStr


class ScenePayload(_WireModel):
    """Common base: a name plus at least one non-empty payload field."""

    payload_fields: ClassVar[tuple[str, ...]] = ()

    name: Text100

    def has_content(self) -> bool:
        return any(getattr(self, field) for field in self.payload_fields)


class RichScenePayload(ScenePayload):
    payload_fields: ClassVar[tuple[str, ...]] = (
        "playlist",
        "soundboards",
        "discord_mute_status",
        "obs_scene",
        "lights",
    )

    playlist: PlaylistRef | None = None
    soundboards: Annotated[list[SoundboardRef], Field(min_length=1, max_length=100)] | None = None
    discord_mute_status: DiscordMuteStatus | None = None
    obs_scene: Text100 | None = None
    lights: LightsRef | None = None

    @field_validator(*payload_fields, mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_null(value)


class SimpleScenePayload(ScenePayload):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel)

    payload_fields: ClassVar[tuple[str, ...]] = ("playlist_id", "soundboard_ids")

    playlist_id: Annotated[str, Field(strict=True, min_length=1)] | None = None
    soundboard_ids: Annotated[list[StrictStr], Field(min_length=1, max_length=100)] | None = None


class CreateCampaign(_WireModel):
    campaign_name: Text100
