"""Tests for the frame index range notation."""

import pytest

from psych2cne.codecs.indices import decode_indices, encode_indices, parse_leading_int


@pytest.mark.unit
class TestEncodeIndices:
    """Tests for encode_indices."""

    def test_run_of_three_collapses(self):
        """Should write three or more consecutive frames as a range."""
        assert encode_indices([5, 6, 7]) == "5..7"

    def test_run_of_two_stays_expanded(self):
        """Should keep a run of two as separate values."""
        assert encode_indices([5, 6]) == "5,6"

    def test_empty(self):
        """Should encode no frames as an empty string."""
        assert encode_indices([]) == ""

    def test_mixed_runs(self):
        """Should mix ranges and single values in order, no trailing comma."""
        assert encode_indices([0, 1, 2, 5]) == "0..2,5"
        assert encode_indices([0, 1, 2, 3, 7, 9, 10]) == "0..3,7,9,10"

    def test_unsorted_input_keeps_order(self):
        """Should not reorder values that aren't consecutive."""
        assert encode_indices([9, 3, 4, 5, 1]) == "9,3..5,1"

    def test_repeated_frames(self):
        """Should keep repeated frames as separate values."""
        assert encode_indices([1, 1, 2]) == "1,1,2"


@pytest.mark.unit
class TestDecodeIndices:
    """Tests for decode_indices."""

    def test_expands_ranges_inclusively(self):
        """Should expand start..end including both ends."""
        assert decode_indices("0..2,5") == [0, 1, 2, 5]

    def test_descending_range_is_empty(self):
        """Should contribute nothing for end < start."""
        assert decode_indices("5..3,8") == [8]

    def test_skips_non_numeric_tokens(self):
        """Should skip tokens that aren't numbers."""
        assert decode_indices("1,abc,2,..,x..4") == [1, 2]

    def test_reads_leading_digits(self):
        """Should read a token's leading integer."""
        assert decode_indices(" 3 , 4px, 6..8f") == [3, 4, 6, 7, 8]

    def test_preserves_token_order(self):
        """Should not sort the result."""
        assert decode_indices("9,3..5,1") == [9, 3, 4, 5, 1]

    @pytest.mark.parametrize("frames", [
        [0],
        [0, 1],
        [0, 1, 2],
        [0, 2, 4, 5, 6, 7, 20],
        list(range(30)),
        [3, 4, 10, 11, 12, 40],
    ])
    def test_sorted_sequences_round_trip(self, frames):
        """Should decode an encoded sorted sequence back to itself."""
        assert decode_indices(encode_indices(frames)) == frames


@pytest.mark.unit
class TestParseLeadingInt:
    """Tests for parse_leading_int."""

    def test_values(self):
        assert parse_leading_int("12") == 12
        assert parse_leading_int(" -4") == -4
        assert parse_leading_int("7.9") == 7
        assert parse_leading_int("x7") is None
        assert parse_leading_int("") is None
