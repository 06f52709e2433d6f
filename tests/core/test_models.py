"""
Unit Tests for Core Models

Tests for BoundaryMatch, the missing sentinel and the statistics tuples.
"""

import pytest

from unitext_toolkit.core.models import (
    BoundaryMatch,
    GeneralStats,
    LatexStats,
    MATCH_COLUMNS,
    MISSING_MATCH,
    is_missing_result,
    missing_result,
)


class TestBoundaryMatch:
    """Tests for BoundaryMatch named tuple."""

    def test_fields_when_accessed_then_named_start_end(self):
        """Column labels should be start/end."""
        assert MATCH_COLUMNS == ("start", "end")
        m = BoundaryMatch(2, 5)
        assert m.start == 2
        assert m.end == 5

    def test_length_when_valid_then_returns_end_minus_start(self):
        """length should count code points in [start, end)."""
        assert BoundaryMatch(2, 5).length == 3

    def test_length_when_missing_then_returns_none(self):
        """Sentinel has no length."""
        assert MISSING_MATCH.length is None

    def test_as_slice_when_valid_then_selects_segment(self):
        """as_slice() should convert 1-based exclusive range to a str slice."""
        assert "abcdef"[BoundaryMatch(2, 5).as_slice()] == "bcd"

    def test_as_slice_when_missing_then_raises_error(self):
        """Sentinel cannot be sliced."""
        with pytest.raises(ValueError, match="missing match"):
            MISSING_MATCH.as_slice()

    def test_is_missing_when_sentinel_then_true(self):
        """(None, None) is the sentinel."""
        assert MISSING_MATCH.is_missing is True
        assert BoundaryMatch(1, 2).is_missing is False


class TestMissingResult:
    """Tests for sentinel result helpers."""

    def test_missing_result_when_called_then_single_sentinel(self):
        """missing_result() should be a one-row list of the sentinel."""
        assert missing_result() == [MISSING_MATCH]

    def test_missing_result_when_called_twice_then_independent_lists(self):
        """Each call returns a new list."""
        first = missing_result()
        first.append(BoundaryMatch(1, 2))
        assert missing_result() == [MISSING_MATCH]

    def test_is_missing_result_when_sentinel_then_true(self):
        assert is_missing_result([MISSING_MATCH]) is True

    def test_is_missing_result_when_matches_then_false(self):
        assert is_missing_result([BoundaryMatch(1, 2)]) is False
        assert is_missing_result([]) is False


class TestStatsTuples:
    """Tests for GeneralStats and LatexStats."""

    def test_general_stats_when_default_then_all_zero(self):
        assert GeneralStats() == (0, 0, 0, 0)

    def test_general_stats_when_added_then_sums_fields(self):
        """+ should sum counters, not concatenate tuples."""
        total = GeneralStats(1, 1, 3, 2) + GeneralStats(1, 0, 2, 0)
        assert total == GeneralStats(lines=2, lines_non_empty=1, chars=5, chars_non_white=2)
        assert len(total) == 4

    def test_latex_stats_when_added_then_sums_fields(self):
        total = LatexStats(1, 2, 3, 4, 5, 6) + LatexStats(1, 1, 1, 1, 1, 1)
        assert total == LatexStats(2, 3, 4, 5, 6, 7)

    def test_as_dict_when_general_then_uses_display_labels(self):
        assert GeneralStats(2, 1, 5, 2).as_dict() == {
            "Lines": 2,
            "LinesNEmpty": 1,
            "Chars": 5,
            "CharsNWhite": 2,
        }

    def test_as_dict_when_latex_then_uses_display_labels(self):
        assert list(LatexStats().as_dict()) == [
            "CharsWord", "CharsCmdEnvir", "CharsWhite", "Words", "Cmds", "Envirs",
        ]
