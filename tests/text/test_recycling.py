"""
Unit Tests for the Recycling Driver
"""

import pytest

from unitext_toolkit.core.errors import RecyclingError
from unitext_toolkit.text.recycling import as_vector, recycle, recycling_length


class TestAsVector:
    """Tests for as_vector()."""

    def test_as_vector_when_string_then_single_element(self):
        assert as_vector("abc") == ["abc"]

    def test_as_vector_when_none_then_single_missing(self):
        assert as_vector(None) == [None]

    def test_as_vector_when_tuple_then_list(self):
        assert as_vector(("a", None, "b")) == ["a", None, "b"]

    def test_as_vector_when_generator_then_materialised(self):
        assert as_vector(s for s in "xy") == ["x", "y"]


class TestRecyclingLength:
    """Tests for recycling_length()."""

    def test_recycling_length_when_lengths_one_or_max_then_returns_max(self):
        assert recycling_length(4, 1, 4) == 4

    def test_recycling_length_when_length_between_then_raises_error(self):
        with pytest.raises(RecyclingError) as info:
            recycling_length(4, 1, 2)
        assert info.value.lengths == (4, 1, 2)

    def test_recycling_length_when_not_divisible_then_raises_error(self):
        with pytest.raises(RecyclingError):
            recycling_length(3, 2)

    def test_recycling_length_when_all_empty_then_zero(self):
        assert recycling_length(0, 0) == 0
        assert recycling_length() == 0

    def test_recycling_length_when_some_empty_then_raises_error(self):
        with pytest.raises(RecyclingError):
            recycling_length(0, 3)

    def test_recycling_length_when_all_ones_then_one(self):
        assert recycling_length(1, 1, 1) == 1


class TestRecycle:
    """Tests for recycle()."""

    def test_recycle_when_scalar_operand_then_repeated(self):
        assert list(recycle(["a", "b", "c"], ["x"])) == [
            (0, ("a", "x")),
            (1, ("b", "x")),
            (2, ("c", "x")),
        ]

    def test_recycle_when_incompatible_then_fails_before_iteration(self):
        """Lengths are checked when recycle() is called, not lazily."""
        with pytest.raises(RecyclingError):
            recycle(["a", "b", "c", "d"], ["x"], ["p", "q"])

    def test_recycle_when_empty_then_no_items(self):
        assert list(recycle([], [])) == []

    def test_recycle_when_fixed_setting_then_length_from_data(self):
        """A fixed operand is repeated but never sets the length."""
        assert list(recycle(["a", "b"], [None], fixed=(1,))) == [
            (0, ("a", None)),
            (1, ("b", None)),
        ]

    def test_recycle_when_data_empty_and_setting_fixed_then_no_items(self):
        assert list(recycle([], ["word"], [None], fixed=(1, 2))) == []

    def test_recycle_when_data_empty_and_setting_counted_then_raises_error(self):
        with pytest.raises(RecyclingError):
            recycle([], [None])

    def test_recycle_when_fixed_setting_empty_then_raises_error(self):
        with pytest.raises(RecyclingError):
            recycle(["a"], [], fixed=(1,))
