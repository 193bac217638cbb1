"""
Unit tests for relevance scoring.

Fuzzy arithmetic reminder: required = max(3, ceil(0.7 * len(pattern))),
a character is accepted within gap 3 of the previous match, or inside the
secondary window [start, start + 5).
"""

import pytest

from postershelf.search.scorer import (
    SCORE_EXACT,
    SCORE_FUZZY,
    SCORE_NONE,
    SCORE_PREFIX,
    SCORE_SUBSTRING,
    SCORE_WHOLE_WORD,
    fuzzy_match,
    score,
    word_boundary_match,
)
from postershelf.transliteration import TableTransliterator, UnidecodeTransliterator

pytestmark = pytest.mark.unit


@pytest.fixture(params=[TableTransliterator, UnidecodeTransliterator], ids=["table", "unidecode"])
def transliterator(request):
    return request.param()


class TestScoreTiers:
    """First matching tier wins"""

    def test_exact_cleaned_name(self, transliterator):
        assert score("Movie Title", "Movie Title", "Movie Title [[Films]]", transliterator) == SCORE_EXACT

    def test_exact_is_case_insensitive(self, transliterator):
        assert score("MOVIE TITLE", "Movie Title", "Movie Title", transliterator) == 1000

    def test_exact_original_stem(self, transliterator):
        stem = "Movie Title [[Films]]"
        assert score(stem.lower(), "Movie Title", stem, transliterator) == SCORE_EXACT

    def test_prefix(self, transliterator):
        assert score("Mov", "Movie Title", "Movie Title", transliterator) == SCORE_PREFIX

    def test_whole_word(self, transliterator):
        assert score("Title", "Movie Title", "Movie Title", transliterator) == SCORE_WHOLE_WORD

    def test_whole_word_outranks_substring(self, transliterator):
        whole = score("title", "Movie Title", "Movie Title", transliterator)
        partial = score("itle", "Movie Title", "Movie Title", transliterator)
        assert whole == 800
        assert partial == 700
        assert whole > partial

    def test_substring_only(self, transliterator):
        assert score("ovie", "Movie Title", "Movie Title", transliterator) == SCORE_SUBSTRING

    def test_whole_word_with_digits(self, transliterator):
        assert score("2049", "Blade Runner 2049", "Blade Runner 2049", transliterator) == 800

    def test_fuzzy_requires_four_characters(self, transliterator):
        assert score("mve", "Movie", "Movie", transliterator) == SCORE_NONE

    def test_fuzzy_four_characters(self, transliterator):
        assert score("mvie", "Movie", "Movie", transliterator) == SCORE_FUZZY

    def test_fuzzy_misspelling(self, transliterator):
        assert score("mtrix", "The Matrix", "The Matrix", transliterator) == SCORE_FUZZY

    def test_fuzzy_folds_accents(self, transliterator):
        """Plain-ASCII query finds accented title through the fuzzy tier"""
        assert score("amelie", "Amélie", "Amélie", transliterator) == SCORE_FUZZY

    def test_no_match(self, transliterator):
        assert score("alien", "The Matrix", "The Matrix", transliterator) == SCORE_NONE

    def test_fuzzy_early_abort_through_score(self, transliterator):
        assert score("abxcde", "abqcdeq", "abqcdeq", transliterator) == SCORE_NONE


class TestWordBoundaryMatch:
    """Token-start predicate"""

    def test_token_prefix(self):
        assert word_boundary_match("tit", "Movie Title")

    def test_token_equal(self):
        assert word_boundary_match("title", "Movie Title")

    def test_case_insensitive(self):
        assert word_boundary_match("TIT", "movie title")

    def test_mid_token_rejected(self):
        assert not word_boundary_match("itle", "Movie Title")

    def test_whitespace_runs(self):
        assert word_boundary_match("run", "Blade \t  Runner")

    def test_empty_text(self):
        assert not word_boundary_match("a", "")


class TestFuzzyMatch:
    """Gap-tolerant matcher arithmetic, worked by hand"""

    def test_accept_within_gap(self):
        # t@0 (gap 2), e@1 (gap 1), s@4 (gap 3), t@5 (gap 1) → 4 >= 3
        assert fuzzy_match("test", "tepmst")

    def test_reject_gap_too_large(self):
        # t@0, e@7 is gap 7 and outside window [1, 6) → abort with 1 < 3
        assert not fuzzy_match("test", "txxxxxxest")

    def test_secondary_window_accepts(self):
        # a@0, b@5 is gap 5 > 3 but inside window [1, 6) → a, b, c, d all match
        assert fuzzy_match("abcd", "axxxxbcd")

    def test_secondary_window_bounded(self):
        # b@6 is outside window [1, 6) → abort with 1 match
        assert not fuzzy_match("abcd", "axxxxxbcd")

    def test_first_character_gap(self):
        # Sentinel -2: index 1 is gap 3, accepted directly
        assert fuzzy_match("bcd", "abcd")

    def test_pattern_longer_than_text(self):
        assert not fuzzy_match("abcdef", "abc")

    def test_minimum_three_matches(self):
        # Two-character patterns can never reach the floor of 3
        assert not fuzzy_match("ab", "ab")

    def test_required_is_seventy_percent_rounded_up(self):
        # len 10 → required 7
        assert fuzzy_match("abcdefghij", "abcdefgzzzzzzzzz")
        assert not fuzzy_match("abcdefghij", "abcdefzzzzzzzzzz")

    def test_early_abort_does_not_skip_characters(self):
        """
        'x' is missing: the scan stops with a, b matched (2 < 5). A loop that
        skipped the miss would match c, d, e as well and accept.
        """
        assert not fuzzy_match("abxcde", "abqcdeq")

    def test_early_abort_after_enough_matches(self):
        # len 6 → required 5; a..e match, 'z' missing → 5 >= 5
        assert fuzzy_match("abcdez", "abcdeqq")

    def test_exact_equal_strings(self):
        assert fuzzy_match("matrix", "matrix")
