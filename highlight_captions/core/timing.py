"""Per-word highlight timing and cross-group overlap repair.

WHY: Each group renders as n dialogue lines, one per highlighted word.
The lines must tile the group's time on screen without flicker, leave a
short gap before the next group appears, and never overlap each other
(libass would stack overlapping lines vertically).

HOW: resolve_group_cues() assigns each word its interval:
  - not last in group: until the next word's own start
  - last in group: its end (or start + DEFAULT_CUE_TAIL_MS), capped at
    GROUP_GAP_MS before the next group's first start when there is one
resolve_cues() walks all groups with their successors. repair_overlaps()
then sorts every cue by start and clamps any cue that still runs past its
successor to end OVERLAP_GAP_MS early.

RULES:
- Cue start is always the word's own start_ms, unmodified
- The next word's end_ms never affects the previous word's cue
- Sorting is stable, so same-start cues keep resolution order
- Nothing is mutated; new CueEvent tuples are returned
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple

from highlight_captions.core.ir import (
    DEFAULT_CUE_TAIL_MS,
    GROUP_GAP_MS,
    OVERLAP_GAP_MS,
    CueEvent,
    Group,
    Token,
)

logger = logging.getLogger(__name__)

RenderFn = Callable[[Sequence[Token], int], str]
"""Builds a group's text with the word at the given index highlighted."""


def resolve_group_cues(
    group: Group,
    next_group_start_ms: Optional[int],
    render: RenderFn,
) -> List[CueEvent]:
    """Create one CueEvent per token in the group.

    Args:
        group: Non-empty group of tokens.
        next_group_start_ms: First start of the following group, or None
            for the final group.
        render: Text renderer taking (group tokens, active index).

    Returns:
        Cues in word order.
    """
    cues: List[CueEvent] = []
    last_index = len(group) - 1
    for index, token in enumerate(group):
        if index < last_index:
            end_ms = group[index + 1].start_ms
        elif next_group_start_ms is not None:
            end_ms = min(
                token.end_or(DEFAULT_CUE_TAIL_MS),
                next_group_start_ms - GROUP_GAP_MS,
            )
        else:
            end_ms = token.end_or(DEFAULT_CUE_TAIL_MS)
        cues.append(CueEvent(
            start_ms=token.start_ms,
            end_ms=end_ms,
            text=render(group, index),
        ))
    return cues


def resolve_cues(groups: Sequence[Group], render: RenderFn) -> List[CueEvent]:
    """Resolve every group against the start of the group after it."""
    cues: List[CueEvent] = []
    for index, group in enumerate(groups):
        next_start = groups[index + 1][0].start_ms if index + 1 < len(groups) else None
        cues.extend(resolve_group_cues(group, next_start, render))
    return cues


def repair_overlaps(cues: Sequence[CueEvent]) -> Tuple[CueEvent, ...]:
    """Sort cues by start and clamp any that overlap their successor.

    For each consecutive pair where prev.end_ms > curr.start_ms, prev is
    replaced with a copy ending at curr.start_ms - OVERLAP_GAP_MS.
    """
    ordered = sorted(cues, key=lambda cue: cue.start_ms)
    repaired: List[CueEvent] = []
    for cue in ordered:
        if repaired and repaired[-1].end_ms > cue.start_ms:
            logger.debug(
                "Clamping cue at %d ms: end %d overlaps next start %d",
                repaired[-1].start_ms, repaired[-1].end_ms, cue.start_ms,
            )
            repaired[-1] = replace(repaired[-1], end_ms=cue.start_ms - OVERLAP_GAP_MS)
        repaired.append(cue)
    return tuple(repaired)
