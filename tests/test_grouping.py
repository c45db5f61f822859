"""Unit tests for group segmentation and punctuation folding.

WHY: Group boundaries decide what the viewer sees at once. Off-by-one
limits, fragment weights or a stray "." flashing on screen alone are all
visible defects in the rendered video.

HOW: Small hand-built streams for each admission rule, followed by
property-style checks over a deterministic pseudo-random stream.

RULES:
- Limits are strict "greater than": hitting a limit exactly is allowed.
- Segmenter output concatenates back to the input stream in order.
"""

import pytest

from highlight_captions.core.contractions import merge_contractions
from highlight_captions.core.grouping import (
    build_groups,
    merge_punctuation_groups,
    segment_groups,
)
from highlight_captions.core.ir import DEFAULT_DURATION_MS
from highlight_captions.core.lexical import is_sentence_end, word_weight


SEVEN_WORDS = ["one", "two", "three", "four", "five", "six", "seven"]


def _texts(groups):
    return [[t.text for t in group] for group in groups]


class TestWordLimit:

    def test_splits_after_five_words(self, build_tokens):
        tokens = build_tokens([(w, i * 100, i * 100 + 90) for i, w in enumerate(SEVEN_WORDS)])
        groups = segment_groups(tokens, 2500, 5)
        assert _texts(groups) == [SEVEN_WORDS[:5], SEVEN_WORDS[5:]]

    def test_exact_limit_is_allowed(self, build_tokens):
        tokens = build_tokens([(w, i * 100, i * 100 + 90) for i, w in enumerate("abc")])
        assert len(segment_groups(tokens, 2500, 3)) == 1

    def test_fragments_count_half(self, build_tokens):
        words = ["one", "two", "three", "four", "it'", "s"]
        tokens = build_tokens([(w, i * 100, i * 100 + 90) for i, w in enumerate(words)])
        groups = segment_groups(tokens, 2500, 5)
        assert _texts(groups) == [words]

    def test_single_word_limit(self, build_tokens):
        tokens = build_tokens([("a", 0, 100), ("b", 100, 200)])
        assert _texts(segment_groups(tokens, 2500, 1)) == [["a"], ["b"]]


class TestDurationLimit:

    def test_splits_when_span_exceeds(self, build_tokens):
        tokens = build_tokens([
            ("a", 0, 500), ("b", 600, 1100), ("c", 1200, 1700), ("d", 2000, 2600),
        ])
        groups = segment_groups(tokens, 2500, 10)
        assert _texts(groups) == [["a", "b", "c"], ["d"]]

    def test_span_equal_to_limit_is_allowed(self, build_tokens):
        tokens = build_tokens([
            ("a", 0, 500), ("b", 600, 1100), ("c", 1200, 1700), ("d", 2000, 2500),
        ])
        assert len(segment_groups(tokens, 2500, 10)) == 1

    def test_missing_end_uses_default_duration(self, build_tokens):
        limit = 1000
        admitted = build_tokens([("a", 0, 500), ("b", limit - DEFAULT_DURATION_MS)])
        assert len(segment_groups(admitted, limit, 10)) == 1

        rejected = build_tokens([("a", 0, 500), ("b", limit - DEFAULT_DURATION_MS + 1)])
        assert len(segment_groups(rejected, limit, 10)) == 2

    def test_first_token_always_admitted(self, build_tokens):
        tokens = build_tokens([("long", 0, 9000), ("next", 9000, 9100)])
        assert _texts(segment_groups(tokens, 2500, 5)) == [["long"], ["next"]]


class TestSentenceEnd:

    def test_terminator_seals_group(self, build_tokens):
        tokens = build_tokens([("Hi", 0, 100), (".", 100, 120), ("Bye", 500, 600)])
        assert _texts(segment_groups(tokens, 2500, 5)) == [["Hi", "."], ["Bye"]]

    @pytest.mark.parametrize("mark", ["!", "?", "?!", "..."])
    def test_other_terminators_seal(self, build_tokens, mark):
        tokens = build_tokens([("Hi", 0, 100), (mark, 100, 120), ("Bye", 500, 600)])
        assert len(segment_groups(tokens, 2500, 5)) == 2

    def test_comma_does_not_seal(self, build_tokens):
        tokens = build_tokens([("Hi", 0, 100), (",", 100, 120), ("Bye", 500, 600)])
        assert len(segment_groups(tokens, 2500, 5)) == 1

    def test_overflowing_terminator_is_left_alone(self, build_tokens):
        tokens = build_tokens([("a", 0, 100), ("b", 100, 200), (".", 200, 220)])
        assert _texts(segment_groups(tokens, 2500, 2)) == [["a", "b"], ["."]]


class TestMergePunctuationGroups:

    def test_lone_terminator_folds_into_previous(self, build_tokens):
        tokens = build_tokens([("a", 0, 100), ("b", 100, 200), (".", 200, 220)])
        groups = merge_punctuation_groups(segment_groups(tokens, 2500, 2))
        assert _texts(groups) == [["a", "b", "."]]

    def test_leading_lone_terminator_kept(self, build_tokens):
        tokens = build_tokens([(".", 0, 20), ("a", 100, 200)])
        groups = merge_punctuation_groups(segment_groups(tokens, 2500, 5))
        assert _texts(groups) == [["."], ["a"]]

    def test_lone_word_not_folded(self, build_tokens):
        tokens = build_tokens([("a", 0, 100), ("b", 100, 200)])
        groups = merge_punctuation_groups(segment_groups(tokens, 2500, 1))
        assert _texts(groups) == [["a"], ["b"]]

    def test_build_groups_runs_both_passes(self, build_tokens):
        tokens = build_tokens([("a", 0, 100), ("b", 100, 200), ("!", 200, 220), ("c", 300, 400)])
        groups = build_groups(tokens, max_group_duration_ms=2500, max_words_per_group=2)
        assert _texts(groups) == [["a", "b", "!"], ["c"]]

    def test_empty_input(self):
        assert build_groups([], max_group_duration_ms=2500, max_words_per_group=5) == ()


class TestGroupingProperties:
    """Invariants over a long pseudo-random stream."""

    @pytest.mark.parametrize("seed", [1, 7, 42])
    @pytest.mark.parametrize("max_words,max_duration", [(5, 2500), (3, 1800), (2, 900)])
    def test_segment_invariants(self, build_stream, seed, max_words, max_duration):
        tokens = merge_contractions(build_stream(seed))
        groups = segment_groups(tokens, max_duration, max_words)

        assert all(groups)
        assert [t for group in groups for t in group] == tokens

        for group in groups:
            if len(group) > 1:
                assert sum(word_weight(t.text) for t in group) <= max_words
                for token in group[1:]:
                    assert token.end_or(DEFAULT_DURATION_MS) - group[0].start_ms <= max_duration
            for token in group[:-1]:
                assert not is_sentence_end(token.text)

    @pytest.mark.parametrize("seed", [3, 11])
    def test_build_groups_preserves_tokens(self, build_stream, seed):
        tokens = merge_contractions(build_stream(seed))
        groups = build_groups(tokens, max_group_duration_ms=2500, max_words_per_group=5)
        assert [t for group in groups for t in group] == tokens
        for group in groups[1:]:
            assert not (len(group) == 1 and is_sentence_end(group[0].text))
