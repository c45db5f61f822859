"""Exception hierarchy for caption generation.

WHY: Callers (the CLI, a web handler) need to tell "fix your input" apart
from programming errors. Every failure the pipeline raises on purpose is a
CaptionError, and CaptionError is a ValueError so callers that only know
about ValueError keep working.

RULES:
- All errors abort the whole transformation — there is no partial output
- Nothing here is retried; retries belong to the calling service
"""

from __future__ import annotations

from typing import List, Optional


class CaptionError(ValueError):
    """Base class for every deliberate caption-generation failure."""


class EmptyInputError(CaptionError):
    """Raised when there are no tokens or no cue events to work with."""


class MalformedColorError(CaptionError):
    """Raised when a style colour is not a six-digit hex string."""


class MalformedTokenError(CaptionError):
    """Raised for tokens with end < start, or tokens out of start order."""


class UnknownPresetError(CaptionError):
    """Raised when a preset name is not registered."""


class InvalidCustomizationError(CaptionError):
    """Raised when preset overrides fail validation.

    Attributes:
        errors: Every individual problem found, in field order.
    """

    def __init__(self, errors: List[str], preset: Optional[str] = None) -> None:
        self.errors = list(errors)
        self.preset = preset
        super().__init__("Invalid customizations: {}".format(", ".join(self.errors)))
