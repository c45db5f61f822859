"""Fuse split contraction fragments into single tokens.

WHY: Word-level ASR output often splits "I'm" into "I'" and "m" with
separate timestamps. Rendered as-is, the highlight would hop across half a
word and the viewer would see "I' m". Merging first also makes the word
budget in grouping count the pair as one word.

HOW: One left-to-right pass. When token i ends in an apostrophe and token
i+1 starts with lowercase letters, both are replaced by one token spanning
i's start to i+1's end and the index advances by two.

RULES:
- Text is concatenated with no separator
- End time: second fragment's end_ms, or its start + DEFAULT_DURATION_MS
- Confidence: minimum of both, a missing value counting as 1.0
- Exactly one pass; a merged token is never merged again
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from highlight_captions.core.ir import DEFAULT_DURATION_MS, Token
from highlight_captions.core.lexical import is_contraction_end, is_contraction_start


def _merged_confidence(a: Optional[float], b: Optional[float]) -> float:
    return min(1.0 if a is None else a, 1.0 if b is None else b)


def merge_contractions(tokens: Sequence[Token]) -> List[Token]:
    """Return a new token list with adjacent contraction fragments fused.

    Args:
        tokens: Tokens in transcript order. Not modified.

    Returns:
        New list; unmerged tokens are passed through as the same objects.
    """
    merged: List[Token] = []
    i = 0
    while i < len(tokens):
        current = tokens[i]
        if i + 1 < len(tokens):
            following = tokens[i + 1]
            if is_contraction_start(current.text) and is_contraction_end(following.text):
                merged.append(Token(
                    text=current.text + following.text,
                    start_ms=current.start_ms,
                    end_ms=following.end_or(DEFAULT_DURATION_MS),
                    confidence=_merged_confidence(current.confidence, following.confidence),
                ))
                i += 2
                continue
        merged.append(current)
        i += 1
    return merged
