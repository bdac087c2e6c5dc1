"""Tests for Jaro similarity."""

import pytest

from honeyhealth.conventions.similarity import jaro


class TestJaro:
    def test_identical(self):
        assert jaro("http.method", "http.method") == 1.0

    def test_both_empty(self):
        assert jaro("", "") == 1.0

    def test_one_empty(self):
        assert jaro("", "abc") == 0.0
        assert jaro("abc", "") == 0.0

    def test_no_common_characters(self):
        assert jaro("abc", "xyz") == 0.0

    def test_transposition(self):
        assert jaro("MARTHA", "MARHTA") == pytest.approx(0.944444, abs=1e-5)

    def test_reference_pair(self):
        assert jaro("DIXON", "DICKSONX") == pytest.approx(0.766667, abs=1e-5)

    def test_symmetric(self):
        assert jaro("http.Method", "http.method") == jaro("http.method", "http.Method")

    def test_case_sensitive(self):
        # one of eleven characters differs
        assert jaro("http.Method", "http.method") == pytest.approx((10 / 11 * 2 + 1) / 3)

    def test_single_characters(self):
        assert jaro("a", "a") == 1.0
        assert jaro("a", "b") == 0.0

    def test_window_limits_matches(self):
        # 'a' and 'b' are further apart than the match window
        assert jaro("abcdefgh", "hbcdefga") < 1.0
