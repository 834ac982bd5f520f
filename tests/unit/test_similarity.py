"""
Unit Tests for the edit-distance similarity scorer.
"""

import pytest

from vocab_tutor.services.similarity import levenshtein_distance, similarity


class TestLevenshteinDistance:

    def test_identical_strings(self):
        assert levenshtein_distance("apple", "apple") == 0

    def test_against_empty(self):
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3

    def test_classic_kitten_sitting(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_single_insertion(self):
        assert levenshtein_distance("aple", "apple") == 1


class TestSimilarity:

    def test_both_empty_is_identical(self):
        assert similarity("", "") == 1.0

    def test_exact_match(self):
        assert similarity("cat", "cat") == 1.0

    def test_all_substitutions(self):
        """Three substitutions over length three leave nothing in common."""
        assert similarity("cat", "dog") == 0.0

    def test_one_empty(self):
        assert similarity("", "apple") == 0.0

    def test_normalized_by_longer_string(self):
        assert similarity("aple", "apple") == pytest.approx(0.8)

    @pytest.mark.parametrize("a,b", [
        ("apple", "appel"),
        ("happy", "hippo"),
        ("banana", "an"),
        ("", "xyz"),
        ("kitten", "sitting"),
    ])
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    @pytest.mark.parametrize("text", ["", "a", "apple", "good morning"])
    def test_reflexive(self, text):
        assert similarity(text, text) == 1.0

    def test_range(self):
        for a, b in [("a", "bcdef"), ("hello", "help"), ("xyz", "apple")]:
            assert 0.0 <= similarity(a, b) <= 1.0
