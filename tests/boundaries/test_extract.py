"""
Tests for boundaries.extract

Test Coverage:
- split_boundaries(): pieces rejoin to the input, missing handling
- extract_words() / count_words(): word substrings and counts
"""

import pytest

from unitext_toolkit.boundaries.extract import count_words, extract_words, split_boundaries


class TestSplitBoundaries:
    """Tests for split_boundaries()."""

    @pytest.mark.parametrize("boundary", ["character", "line-break", "sentence", "word"])
    def test_split_when_joined_then_original_text(self, boundary, sample_sentences):
        [pieces] = split_boundaries(sample_sentences, boundary)
        assert "".join(pieces) == sample_sentences

    def test_split_when_word_boundary_then_punctuation_kept(self):
        assert split_boundaries("Hi there.", "word") == [["Hi", " ", "there", "."]]

    def test_split_when_supplementary_chars_then_whole_code_points(self, mixed_width_text):
        [pieces] = split_boundaries(mixed_width_text, "character")
        assert pieces == list(mixed_width_text)

    def test_split_when_empty_or_missing_then_empty_or_none(self):
        assert split_boundaries(["", None], "word") == [[], None]

    def test_split_when_boundary_missing_then_none(self):
        assert split_boundaries(["ab", "cd"], ["word", None]) == [["ab"], None]

    def test_split_when_locale_element_missing_then_none(self):
        assert split_boundaries("ab", "character", ["en_US", None]) == [["a", "b"], None]

    def test_split_when_empty_vector_then_empty_result(self):
        assert split_boundaries([], []) == []

    def test_split_when_locale_generator_then_consumed_once(self):
        result = split_boundaries(["ab", "cd"], "character", (loc for loc in ["en_US", "de_DE"]))
        assert result == [["a", "b"], ["c", "d"]]


class TestExtractWords:
    """Tests for extract_words() and count_words()."""

    def test_extract_when_mixed_inputs_then_words_empty_and_none(self):
        assert extract_words(["One, two!", "", None]) == [["One", "two"], [], None]

    def test_extract_when_only_punctuation_then_empty_list(self):
        assert extract_words("?! ...") == [[]]

    def test_extract_when_contraction_then_single_word(self):
        assert extract_words("don't stop") == [["don't", "stop"]]

    def test_extract_when_locale_element_missing_then_none(self):
        assert extract_words(["a b", "c"], ["en_US", None]) == [["a", "b"], None]

    def test_extract_when_empty_vector_then_empty_result(self):
        assert extract_words(()) == []
        assert count_words(()) == []

    def test_count_when_mixed_inputs_then_counts_and_none(self):
        assert count_words(["One, two!", "", None]) == [2, 0, None]

    def test_count_when_numbers_and_words_then_both_counted(self):
        assert count_words("3 blind mice, 2.5 cats") == [5]
