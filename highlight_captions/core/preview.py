"""Pick a representative frame time for caption previews.

WHY: Before burning captions into a whole video, the service renders a
single preview frame. A frame with no words on screen, or one caught
mid-transition on a 50 ms blip, tells the user nothing about the style.

HOW: Choose a token according to the preferred position, then return the
midpoint of that token in seconds.
  start  — first token lasting at least 300 ms (else the first token)
  end    — last token lasting at least 300 ms (else the last token)
  middle — token closest to the midpoint between first and last starts,
           scored as distance - 2 * duration, tokens under 200 ms ignored

RULES:
- Missing end_ms counts as start_ms + 500
- Empty input raises EmptyInputError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from highlight_captions.core.ir import Token
from highlight_captions.errors import EmptyInputError

PREVIEW_POSITIONS = ("start", "middle", "end")

_PREVIEW_DEFAULT_DURATION_MS = 500
_EDGE_MIN_DURATION_MS = 300
_MIDDLE_MIN_DURATION_MS = 200


@dataclass(frozen=True)
class PreviewPoint:
    """Chosen preview frame.

    Attributes:
        timestamp_s: Frame time in seconds.
        token: The token the frame is centred on.
        reason: Short human-readable explanation for logs and CLI output.
    """

    timestamp_s: float
    token: Token
    reason: str


def _duration(token: Token) -> int:
    return token.end_or(_PREVIEW_DEFAULT_DURATION_MS) - token.start_ms


def find_preview_timestamp(tokens: Sequence[Token], position: str = "middle") -> PreviewPoint:
    """Return the best preview frame for the given position.

    Raises:
        EmptyInputError: If tokens is empty.
        ValueError: If position is not one of PREVIEW_POSITIONS.
    """
    if not tokens:
        raise EmptyInputError("No captions available for preview")
    if position not in PREVIEW_POSITIONS:
        raise ValueError(
            "Unknown preview position '{}'. Available: {}".format(
                position, ", ".join(PREVIEW_POSITIONS)
            )
        )

    if position == "start":
        target = next(
            (t for t in tokens if _duration(t) >= _EDGE_MIN_DURATION_MS), tokens[0]
        )
        reason = "First caption with good duration"
    elif position == "end":
        target = next(
            (t for t in reversed(tokens) if _duration(t) >= _EDGE_MIN_DURATION_MS),
            tokens[-1],
        )
        reason = "Last caption with good duration"
    else:
        first_start = tokens[0].start_ms
        middle_ms = first_start + (tokens[-1].start_ms - first_start) / 2
        target = tokens[0]
        best_score = float("inf")
        for token in tokens:
            duration = _duration(token)
            score = abs(token.start_ms - middle_ms) - duration * 2
            if duration >= _MIDDLE_MIN_DURATION_MS and score < best_score:
                best_score = score
                target = token
        reason = "Middle caption with optimal duration"

    end_ms = target.end_or(_PREVIEW_DEFAULT_DURATION_MS)
    timestamp_s = (target.start_ms + (end_ms - target.start_ms) / 2) / 1000.0
    return PreviewPoint(
        timestamp_s=timestamp_s,
        token=target,
        reason='{}: "{}" at {:.2f}s'.format(reason, target.text, timestamp_s),
    )
