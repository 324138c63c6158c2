import pytest

from dineout_offers.matching import edit_distance, is_fuzzy_match, score, similarity, word_similar
from dineout_offers.matching.similarity import SUBSTRING_SCORE


class TestEditDistance:
    def test_classic_levenshtein(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_empty_strings(self):
        assert edit_distance("", "") == 0
        assert edit_distance("abc", "") == 3
        assert edit_distance("", "abcd") == 4

    def test_runs_on_normalized_forms(self):
        assert edit_distance("HDFC!", "hdfc") == 0
        assert edit_distance("Café", "cafe") == 0


def test_similarity_bounds():
    assert similarity("select", "select") == 1.0
    assert similarity("", "select") == 0.0
    assert similarity("selct", "select") == pytest.approx(1 - 1 / 6)


class TestScore:
    def test_substring_dominates(self):
        assert score("regalia", "HDFC Regalia") == SUBSTRING_SCORE

    def test_empty_query_scores_zero(self):
        assert score("", "HDFC Regalia") == 0
        assert score("  !! ", "HDFC Regalia") == 0

    def test_weighted_word_overlap_and_similarity(self):
        # one of two query words found inside a candidate word
        value = score("hdfc reg", "HDFC Millennia")
        assert 0.35 < value < 0.65

    def test_unrelated_text_scores_low(self):
        assert score("zzzz", "HDFC Regalia") < 0.3


class TestFuzzyMatch:
    def test_substring(self):
        assert is_fuzzy_match("regal", "HDFC Regalia")

    def test_single_word_typo(self):
        # 6-letter query against a 7-letter word, one deletion
        assert is_fuzzy_match("reglia", "HDFC Regalia")
        assert is_fuzzy_match("selct", "Axis Select Credit Card")

    def test_whole_string_similarity(self):
        assert is_fuzzy_match("hdfc regalla", "HDFC Regalia")

    def test_short_words_are_not_compared(self):
        assert not word_similar("ax", "axis")

    def test_no_match(self):
        assert not is_fuzzy_match("xyz", "HDFC Regalia")
        assert not is_fuzzy_match("", "HDFC Regalia")
        assert not is_fuzzy_match("regalia", "")

    def test_looser_than_score(self):
        # fuzzy predicate accepts what score() alone would filter out
        assert score("selct", "Axis Select Credit Card") < 0.3
        assert is_fuzzy_match("selct", "Axis Select Credit Card")
