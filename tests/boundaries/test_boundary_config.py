"""
Unit Tests for boundaries.config

Tests for boundary kind matching and the rule-status filter.
"""

import pytest

from unitext_toolkit.boundaries.config import (
    BoundaryKind,
    RuleStatusFilter,
    match_boundary_kind,
)
from unitext_toolkit.core.errors import InvalidOptionError


class TestMatchBoundaryKind:
    """Tests for match_boundary_kind()."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("character", BoundaryKind.CHARACTER),
            ("line-break", BoundaryKind.LINE_BREAK),
            ("sentence", BoundaryKind.SENTENCE),
            ("word", BoundaryKind.WORD),
        ],
    )
    def test_match_when_exact_label_then_returns_kind(self, label, expected):
        assert match_boundary_kind(label) is expected

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("char", BoundaryKind.CHARACTER),
            ("line", BoundaryKind.LINE_BREAK),
            ("s", BoundaryKind.SENTENCE),
            ("w", BoundaryKind.WORD),
        ],
    )
    def test_match_when_unique_prefix_then_returns_kind(self, label, expected):
        assert match_boundary_kind(label) is expected

    def test_match_when_kind_given_then_returned_unchanged(self):
        assert match_boundary_kind(BoundaryKind.WORD) is BoundaryKind.WORD

    @pytest.mark.parametrize("label", ["title", "", "Word", "words", 3])
    def test_match_when_unknown_then_raises_invalid_option(self, label):
        with pytest.raises(InvalidOptionError) as info:
            match_boundary_kind(label)
        assert info.value.param == "boundary"


class TestRuleStatusFilter:
    """Tests for RuleStatusFilter dataclass."""

    def test_default_when_created_then_skips_nothing(self):
        f = RuleStatusFilter()
        for kind in BoundaryKind:
            assert f.ranges_for(kind) == []
            assert f.is_active(kind) is False

    def test_words_when_word_kind_then_skips_none_range(self):
        assert RuleStatusFilter.words().ranges_for(BoundaryKind.WORD) == [(0, 100)]

    def test_words_when_other_kind_then_inactive(self):
        """Word flags do not apply to sentence iterators."""
        assert RuleStatusFilter.words().is_active(BoundaryKind.SENTENCE) is False

    def test_ranges_for_when_line_flags_then_returns_line_ranges(self):
        f = RuleStatusFilter(skip_line_soft=True, skip_line_hard=True)
        assert f.ranges_for(BoundaryKind.LINE_BREAK) == [(0, 100), (100, 200)]

    def test_ranges_for_when_sentence_sep_then_returns_sep_range(self):
        f = RuleStatusFilter(skip_sentence_sep=True)
        assert f.ranges_for(BoundaryKind.SENTENCE) == [(100, 200)]

    def test_ranges_for_when_character_kind_then_always_empty(self):
        f = RuleStatusFilter(skip_word_none=True, skip_line_soft=True)
        assert f.ranges_for(BoundaryKind.CHARACTER) == []

    def test_init_when_flag_not_bool_then_raises_error(self):
        with pytest.raises(ValueError, match="skip_word_none must be a bool"):
            RuleStatusFilter(skip_word_none=1)

    def test_init_when_frozen_then_immutable(self):
        f = RuleStatusFilter()
        with pytest.raises(AttributeError):
            f.skip_word_none = True  # type: ignore
