"""Partition tokens into on-screen caption groups.

WHY: Word-highlight captions show a handful of words at once. Too many
words or too long a span and the line becomes unreadable; a sentence that
spills into the next group reads as one run-on caption. The segmenter
decides which words share the screen.

HOW: A fold over the merged token stream with two states:
  Empty        — no open group; the next token always opens one
  Accumulating — a token is admitted unless the group's span (to the
                 token's end) or its word weight would exceed the limit,
                 in which case the open group is sealed and the token
                 opens a new one
After admission, a sentence terminator seals its group immediately. A
second fold, merge_punctuation_groups(), folds any lone terminator group
back into its predecessor.

RULES:
- Limits are explicit parameters (no module or environment defaults)
- "Exceeds" is strictly greater than; hitting a limit exactly is allowed
- The first token of a group is admitted whatever its own weight/span
- Admission span uses end_ms, or start_ms + DEFAULT_DURATION_MS
- Tokens must already be merged (contractions) and validated (ordering)
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from highlight_captions.core.ir import DEFAULT_DURATION_MS, Group, Token
from highlight_captions.core.lexical import is_sentence_end, word_weight

logger = logging.getLogger(__name__)


def segment_groups(
    tokens: Sequence[Token],
    max_group_duration_ms: int,
    max_words_per_group: float,
) -> Tuple[Group, ...]:
    """Single left-to-right pass producing sealed groups.

    Args:
        tokens: Merged, validated tokens in start order.
        max_group_duration_ms: Upper bound on a group's span in ms.
        max_words_per_group: Upper bound on a group's summed word weight.

    Returns:
        Tuple of non-empty groups in order. Lone terminator groups may
        still be present; see merge_punctuation_groups().
    """
    sealed: List[Group] = []
    current: List[Token] = []
    group_start_ms = 0
    weight = 0.0

    for token in tokens:
        token_weight = word_weight(token.text)
        if not current:
            current = [token]
            group_start_ms = token.start_ms
            weight = token_weight
        else:
            would_be_duration = token.end_or(DEFAULT_DURATION_MS) - group_start_ms
            would_be_weight = weight + token_weight
            if (
                would_be_duration > max_group_duration_ms
                or would_be_weight > max_words_per_group
            ):
                sealed.append(tuple(current))
                current = [token]
                group_start_ms = token.start_ms
                weight = token_weight
            else:
                current.append(token)
                weight = would_be_weight

        if is_sentence_end(token.text):
            sealed.append(tuple(current))
            current = []
            weight = 0.0

    if current:
        sealed.append(tuple(current))

    return tuple(sealed)


def merge_punctuation_groups(groups: Sequence[Group]) -> Tuple[Group, ...]:
    """Fold single-terminator groups into the group before them.

    A lone "." shows up when the terminator itself overflowed the previous
    group's budget. It must not flash on screen alone, so its token is
    appended to the preceding group. A lone terminator at the very start
    has no predecessor and is kept.
    """
    result: List[Group] = []
    for group in groups:
        if len(group) == 1 and is_sentence_end(group[0].text) and result:
            logger.debug(
                "Folding lone terminator %r at %d ms into previous group",
                group[0].text, group[0].start_ms,
            )
            result[-1] = result[-1] + group
        else:
            result.append(group)
    return tuple(result)


def build_groups(
    tokens: Sequence[Token],
    max_group_duration_ms: int,
    max_words_per_group: float,
) -> Tuple[Group, ...]:
    """Segment tokens and repair orphan punctuation groups."""
    groups = merge_punctuation_groups(
        segment_groups(tokens, max_group_duration_ms, max_words_per_group)
    )
    logger.debug("Built %d groups from %d tokens", len(groups), len(tokens))
    return groups
