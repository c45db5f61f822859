"""Shared test fixtures for the highlight_captions test suite.

WHY: Most test modules need the same small token streams, the default
style and the reference 1080x1920 resolution. Centralizing them keeps
expected values in one place.

HOW: Plain helpers build Token lists from (text, start, end) tuples;
pytest fixtures provide styles, resolutions and a long deterministic
pseudo-random stream for property-style checks.

RULES:
- All times are integer milliseconds.
- The random stream uses a fixed seed so failures are reproducible.
- Default CaptionStyle(): font 80, active font 90, white/yellow, bottom.
"""

import random
from typing import List, Optional, Sequence, Tuple

import pytest

from highlight_captions.core.ir import Token, VideoResolution
from highlight_captions.styles.layout import compute_style_parameters
from highlight_captions.styles.models import CaptionStyle

TokenRow = Tuple  # (text, start_ms[, end_ms[, confidence]])


def make_tokens(rows: Sequence[TokenRow]) -> List[Token]:
    """Build Tokens from (text, start[, end[, confidence]]) tuples."""
    tokens: List[Token] = []
    for row in rows:
        text, start = row[0], row[1]
        end: Optional[int] = row[2] if len(row) > 2 else None
        confidence = row[3] if len(row) > 3 else None
        tokens.append(Token(text=text, start_ms=start, end_ms=end, confidence=confidence))
    return tokens


_STREAM_VOCABULARY = [
    "we", "are", "going", "to", "the", "well-known", "market", "today",
    "I'", "m", "you'", "re", "happy", "really", ".", "?", "!", "so",
]


def random_stream(seed: int = 7, count: int = 300) -> List[Token]:
    """Deterministic sorted token stream with gaps, defaults and punctuation."""
    rng = random.Random(seed)
    tokens: List[Token] = []
    start = 0
    for _ in range(count):
        start += rng.randint(0, 700)
        text = rng.choice(_STREAM_VOCABULARY)
        if rng.random() < 0.15:
            end = None
        else:
            end = start + rng.randint(40, 900)
        tokens.append(Token(text=text, start_ms=start, end_ms=end))
    return tokens


@pytest.fixture
def default_style():
    return CaptionStyle()


@pytest.fixture
def reference_resolution():
    return VideoResolution(width=1080, height=1920)


@pytest.fixture
def landscape_resolution():
    return VideoResolution(width=1920, height=1080)


@pytest.fixture
def default_params(reference_resolution, default_style):
    return compute_style_parameters(reference_resolution, default_style)


@pytest.fixture
def hello_world_tokens():
    """'Hello world .' where the period has no end time."""
    return make_tokens([("Hello", 0, 400), ("world", 400, 800), (".", 900)])


@pytest.fixture
def contraction_tokens():
    return make_tokens([("I'", 0, 200), ("m", 200, 350), ("happy", 350, 700)])


@pytest.fixture
def stream_tokens():
    return random_stream()


@pytest.fixture
def build_tokens():
    """Factory fixture: build_tokens([("a", 0, 100), ...]) -> List[Token]."""
    return make_tokens


@pytest.fixture
def build_stream():
    """Factory fixture: build_stream(seed, count) -> sorted random stream."""
    return random_stream
