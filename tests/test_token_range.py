#!/usr/bin/env python3
"""
Pytest tests for TokenRange spans.
"""

import pytest
from release_keywords import InvalidRangeError, TokenRange


class TestTokenRangeBasics:
    """Tests for construction and slicing."""

    def test_end_and_slice(self):
        span = TokenRange(5, 5)
        assert span.end == 10
        assert "Show.H.264.mkv"[span.as_slice()] == "H.264"

    def test_whole(self):
        assert TokenRange.whole("Show.mkv") == TokenRange(0, 8)

    def test_default_is_empty(self):
        assert TokenRange() == TokenRange(0, 0)

    def test_extract(self):
        assert TokenRange(0, 4).extract("Show.mkv") == "Show"

    def test_range_ending_at_sequence_end_is_valid(self):
        assert TokenRange(4, 4).check("Show.mkv") == TokenRange(4, 4)
        assert TokenRange(8, 0).extract("Show.mkv") == ""

    def test_shifted(self):
        assert TokenRange(2, 3).shifted(10) == TokenRange(12, 3)


class TestTokenRangeBounds:
    """Tests for the explicit bounds check."""

    @pytest.mark.parametrize("span", [
        TokenRange(0, 9),
        TokenRange(8, 1),
        TokenRange(-1, 2),
        TokenRange(2, -1),
    ])
    def test_out_of_bounds(self, span):
        with pytest.raises(InvalidRangeError):
            span.check("Show.mkv")
        with pytest.raises(InvalidRangeError):
            span.extract("Show.mkv")

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            TokenRange(3, 3).check("ab")


class TestTokenRangeRelations:
    """Tests for containment, overlap and subtraction."""

    def test_contains(self):
        assert TokenRange(0, 10).contains(TokenRange(2, 3))
        assert not TokenRange(0, 10).contains(TokenRange(8, 3))

    def test_overlaps(self):
        assert TokenRange(0, 5).overlaps(TokenRange(4, 2))
        assert not TokenRange(0, 5).overlaps(TokenRange(5, 2))

    @pytest.mark.parametrize("spans,expected", [
        ([], [TokenRange(0, 10)]),
        ([TokenRange(3, 2)], [TokenRange(0, 3), TokenRange(5, 5)]),
        ([TokenRange(6, 2), TokenRange(1, 2)], [TokenRange(0, 1), TokenRange(3, 3), TokenRange(8, 2)]),
        ([TokenRange(0, 4), TokenRange(2, 4)], [TokenRange(6, 4)]),
        ([TokenRange(8, 5)], [TokenRange(0, 8)]),
        ([TokenRange(0, 10)], []),
        ([TokenRange(20, 2), TokenRange(4, 0)], [TokenRange(0, 10)]),
    ])
    def test_subtract(self, spans, expected):
        assert TokenRange(0, 10).subtract(spans) == expected

    def test_subtract_respects_offset(self):
        assert TokenRange(10, 10).subtract([TokenRange(5, 7)]) == [TokenRange(12, 8)]
