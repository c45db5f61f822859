"""Lexical classification of token text.

WHY: Speech-to-text services split contractions ("I'" + "m") and emit
sentence punctuation as standalone tokens. Merging and grouping both need
the same small set of shape predicates, so they live in one place.

HOW: Compiled regular expressions behind plain predicate functions, plus a
closed WordShape enum that drives the word-count weight used by the group
segmenter.

RULES:
- Every predicate strips surrounding whitespace first
- Apostrophes may be straight (') or curly (’)
- A FRAGMENT weighs 0.5 words; HYPHENATED and PLAIN weigh 1.0
- "I'm" is PLAIN once merged, so two fragments become one full word
"""

from __future__ import annotations

import re
from enum import Enum

_CONTRACTION_START_RE = re.compile(r"\w+['’]$")
_CONTRACTION_END_RE = re.compile(r"^[a-z]+")
_HYPHENATED_RE = re.compile(r"^\w+(?:[-‐]\w+)+$")
_SENTENCE_END_RE = re.compile(r"^[.!?]+$")
_PUNCTUATION_ONLY_RE = re.compile(r"^[^\w\s]+$")

# Bare tails left behind when a contraction is split after the apostrophe,
# and apostrophe-led tails ("'s", "’ll").
_BARE_SUFFIX_RE = re.compile(r"^(?:m|s|t|d|ll|re|ve)$")
_APOSTROPHE_SUFFIX_RE = re.compile(r"^['’][a-z]+$")


class WordShape(Enum):
    """Closed set of text shapes that matter for word counting."""

    FRAGMENT = "fragment"
    HYPHENATED = "hyphenated"
    PLAIN = "plain"


WORD_WEIGHTS = {
    WordShape.FRAGMENT: 0.5,
    WordShape.HYPHENATED: 1.0,
    WordShape.PLAIN: 1.0,
}


def is_contraction_start(text: str) -> bool:
    """True if text ends in a word followed by an apostrophe ("I'", "don’")."""
    return bool(_CONTRACTION_START_RE.search(text.strip()))


def is_contraction_end(text: str) -> bool:
    """True if text begins with a run of lowercase letters ("m", "re")."""
    return bool(_CONTRACTION_END_RE.match(text.strip()))


def is_hyphenated_word(text: str) -> bool:
    return bool(_HYPHENATED_RE.match(text.strip()))


def is_sentence_end(text: str) -> bool:
    """True if text is only sentence terminators (".", "?!", "...")."""
    return bool(_SENTENCE_END_RE.match(text.strip()))


def is_punctuation_only(text: str) -> bool:
    return bool(_PUNCTUATION_ONLY_RE.match(text.strip()))


def classify(text: str) -> WordShape:
    """Map token text onto its WordShape.

    A fragment is either the head of a split contraction ("I'") or a bare
    contraction tail ("m", "'s"). Hyphenated compounds count as one word.
    """
    stripped = text.strip()
    if (
        is_contraction_start(stripped)
        or _BARE_SUFFIX_RE.match(stripped)
        or _APOSTROPHE_SUFFIX_RE.match(stripped)
    ):
        return WordShape.FRAGMENT
    if is_hyphenated_word(stripped):
        return WordShape.HYPHENATED
    return WordShape.PLAIN


def word_weight(text: str) -> float:
    """Contribution of a token to its group's word budget."""
    return WORD_WEIGHTS[classify(text)]
