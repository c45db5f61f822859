"""Word-highlight caption generator — timestamped words to an ASS script.

WHY: Short-form vertical video uses "karaoke" captions: a few words on
screen at once with the currently spoken word highlighted. Speech-to-text
services give us word-level timestamps, but a renderer like libass needs a
finished Advanced SubStation Alpha script with one dialogue line per
highlight state. This package is the pure transformation in between.

HOW: Four stages, each independently testable:
  1. core.contractions — fuse split contractions ("I'" + "m" → "I'm")
  2. core.grouping     — partition words into on-screen groups
  3. core.timing       — per-word highlight intervals + overlap repair
  4. formatters.ass_script — serialize header, style row and dialogues
The styles package turns a (resolution, CaptionStyle) pair into pixel and
colour values that the encoder and word renderer consume.

RULES:
- generate_ass() is the single public entry point for producing a script
- No I/O, no global state: one call, one token list, one string out
- Errors abort the whole call; there is no partial output
"""

from __future__ import annotations

import logging
from typing import Sequence

from highlight_captions.core.contractions import merge_contractions
from highlight_captions.core.grouping import build_groups
from highlight_captions.core.ir import CueEvent, Token, VideoResolution
from highlight_captions.core.timing import repair_overlaps, resolve_cues
from highlight_captions.core.validation import validate_tokens
from highlight_captions.errors import (
    CaptionError,
    EmptyInputError,
    InvalidCustomizationError,
    MalformedColorError,
    MalformedTokenError,
    UnknownPresetError,
)
from highlight_captions.formatters.ass_script import encode_script
from highlight_captions.styles.layout import compute_style_parameters, render_group_text
from highlight_captions.styles.models import CaptionStyle
from highlight_captions.styles.presets import PRESETS, resolve_style

__version__ = "0.1.0"

__all__ = [
    "generate_ass",
    "Token",
    "CueEvent",
    "VideoResolution",
    "CaptionStyle",
    "PRESETS",
    "resolve_style",
    "CaptionError",
    "EmptyInputError",
    "MalformedColorError",
    "MalformedTokenError",
    "UnknownPresetError",
    "InvalidCustomizationError",
]

logger = logging.getLogger(__name__)


def generate_ass(
    tokens: Sequence[Token],
    resolution: VideoResolution,
    style: CaptionStyle,
) -> str:
    """Render timestamped tokens into a complete ASS subtitle script.

    WHY: This is the only call the surrounding service needs. Everything
    it depends on (grouping limits, colours, margins) comes in through
    the arguments, so concurrent calls for different videos never share
    state.

    HOW: Fails fast on empty input, computes style parameters (which
    validates every colour before any grouping work), validates the raw
    tokens, merges contraction fragments, groups, resolves per-word cues,
    repairs overlaps and encodes. Validation runs before merging so a
    contraction pair cannot hide an unsorted or inverted fragment.

    RULES:
    - Empty token list → EmptyInputError
    - Bad colour in the style → MalformedColorError (a ValueError)
    - Unsorted tokens or end < start → MalformedTokenError
    - Grouping limits come from style.max_group_duration_ms and
      style.max_words_per_group

    Args:
        tokens: Word-level tokens ordered by start_ms.
        resolution: Target video resolution (width, height) in pixels.
        style: Caption style, usually from resolve_style().

    Returns:
        The full ASS script as a string.
    """
    if not tokens:
        raise EmptyInputError("No captions provided")

    params = compute_style_parameters(resolution, style)

    validate_tokens(tokens)
    merged = merge_contractions(tokens)

    groups = build_groups(
        merged,
        max_group_duration_ms=style.max_group_duration_ms,
        max_words_per_group=style.max_words_per_group,
    )

    def _render(words: Sequence[Token], active_index: int) -> str:
        return render_group_text([w.text for w in words], active_index, params)

    cues = repair_overlaps(resolve_cues(groups, _render))
    logger.debug(
        "Generated %d cue events from %d tokens in %d groups",
        len(cues), len(merged), len(groups),
    )
    return encode_script(cues, resolution, params)
