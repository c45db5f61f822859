"""Intermediate representation dataclasses for the caption pipeline.

WHY: Transcription output arrives as loosely shaped JSON, but every stage
after the adapter needs the same small, well-typed records. Freezing them
lets stages pass tuples around without defensive copies.

HOW: Three frozen dataclasses and one alias:
  Token           — one timestamped word or fragment from speech-to-text
  Group           — tuple of Tokens that render together on screen
  CueEvent        — one subtitle line for one highlighted-word state
  VideoResolution — target pixel size supplied by the media probe

RULES:
- All times are integer milliseconds
- Token.end_ms may be None; stages synthesize a default when they need one
- The two defaults differ on purpose: DEFAULT_DURATION_MS for merging and
  group admission, DEFAULT_CUE_TAIL_MS for a group's final cue
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_DURATION_MS = 300
"""Synthesized duration for a token without end_ms (merge, admission)."""

DEFAULT_CUE_TAIL_MS = 400
"""Synthesized hold for the last cue of a group without end_ms."""

GROUP_GAP_MS = 20
"""Minimum gap between a group's last cue and the next group's first."""

OVERLAP_GAP_MS = 10
"""Gap enforced by the final cross-group overlap repair."""


@dataclass(frozen=True)
class Token:
    """A single timestamped word from a speech-to-text transcript.

    Attributes:
        text: Word text as transcribed (never paraphrased).
        start_ms: Onset in milliseconds.
        end_ms: Offset in milliseconds, or None when the service omitted it.
        confidence: Recognition confidence 0..1, or None.
    """

    text: str
    start_ms: int
    end_ms: Optional[int] = None
    confidence: Optional[float] = None

    def end_or(self, default_duration_ms: int) -> int:
        """Return end_ms, or start_ms + default_duration_ms when absent."""
        if self.end_ms is None:
            return self.start_ms + default_duration_ms
        return self.end_ms


Group = Tuple[Token, ...]
"""An ordered, non-empty run of tokens rendered as one on-screen cue."""


@dataclass(frozen=True)
class CueEvent:
    """One rendered subtitle line.

    Attributes:
        start_ms: When the line appears.
        end_ms: When the line disappears.
        text: Full group text with exactly one word styled as active.
    """

    start_ms: int
    end_ms: int
    text: str


@dataclass(frozen=True)
class VideoResolution:
    """Target video size in pixels."""

    width: int
    height: int
