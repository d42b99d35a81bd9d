"""Error taxonomy for the scene store.

Storage functions raise these; the HTTP layer turns any of them into a 400
with ``{"error": message}``. I/O and JSON decode errors are deliberately not
part of this hierarchy and propagate unchanged.
"""


class SceneStoreError(Exception):
    """Base class for every recoverable, client-facing failure."""

    default_message = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingConfigurationError(SceneStoreError):
    """The storage location is not configured. Fatal at startup."""


class SceneValidationError(SceneStoreError, ValueError):
    """Candidate failed the shape check or the content rule."""

    default_message = "Invalid Scene"


class DuplicateNameError(SceneStoreError):
    """Normalized scene name already taken within the scope."""


class UnknownCampaignError(SceneStoreError, LookupError):
    """Referenced campaign does not exist."""


class UnknownSceneError(SceneStoreError, LookupError):
    """Referenced scene id does not exist within the campaign (or store)."""


class DuplicateCampaignError(SceneStoreError):
    """Campaign creation requested for an existing normalized name."""


class StorageModeError(SceneStoreError):
    """Operation or argument not valid in the configured storage mode."""
