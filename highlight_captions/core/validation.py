"""Precondition checks on the token stream before grouping.

WHY: The group segmenter and the timing resolver assume tokens are sorted
by start time and that no token ends before it starts. Violations would
produce negative cue durations or scrambled highlights, so they are
rejected up front instead of being rendered badly.

HOW: Runs on the raw token stream, before contraction merging. A merged
token takes its start from the head fragment and its end from the tail,
which would hide a tail that starts early or a head that ends early.

RULES:
- start_ms must be non-decreasing (equal starts are allowed)
- end_ms, when present, must be >= start_ms
- text must contain something besides whitespace
- The first violation raises MalformedTokenError naming its index
"""

from __future__ import annotations

from typing import Sequence

from highlight_captions.core.ir import Token
from highlight_captions.errors import MalformedTokenError


def validate_tokens(tokens: Sequence[Token]) -> None:
    previous_start = None
    for index, token in enumerate(tokens):
        if not token.text.strip():
            raise MalformedTokenError(
                "Token {} has empty text".format(index)
            )
        if token.end_ms is not None and token.end_ms < token.start_ms:
            raise MalformedTokenError(
                "Token {} ({!r}) ends at {} ms before it starts at {} ms".format(
                    index, token.text, token.end_ms, token.start_ms
                )
            )
        if previous_start is not None and token.start_ms < previous_start:
            raise MalformedTokenError(
                "Token {} ({!r}) starts at {} ms, before the previous token at {} ms; "
                "tokens must be sorted by start time".format(
                    index, token.text, token.start_ms, previous_start
                )
            )
        previous_start = token.start_ms
