"""
Tiered relevance scoring for poster search.

Every candidate gets the score of the first tier it satisfies
(case-insensitive throughout):

    Tier  Score  Condition
    1     1000   cleaned name or original stem equals the query
    2      900   cleaned name starts with the query
    3      800   query occurs as a whole word
    4      700   query occurs anywhere as a substring
    5      600   some token starts with / equals the query
    6      500   query is a strict prefix of a longer token
    7      200   query has >= 4 chars and fuzzy-matches the normalized name
    -        0   no match (excluded from results)

Tiers 5 and 6 overlap with the substring tiers for most inputs; they are kept
as separate fallbacks so a given match always lands on the same score.
"""

import re
from typing import Optional

from ..transliteration import BaseTransliterator
from .normalizer import normalize

SCORE_EXACT = 1000
SCORE_PREFIX = 900
SCORE_WHOLE_WORD = 800
SCORE_SUBSTRING = 700
SCORE_WORD_BOUNDARY = 600
SCORE_TOKEN_PREFIX = 500
SCORE_FUZZY = 200
SCORE_NONE = 0

FUZZY_MIN_QUERY_LENGTH = 4
FUZZY_MAX_GAP = 3
FUZZY_MIN_MATCHES = 3

_WHITESPACE = re.compile(r"\s+")


def _tokens(text: str):
    return [t for t in _WHITESPACE.split(text) if t]


def word_boundary_match(pattern: str, text: str) -> bool:
    """
    True if any whitespace-delimited token of text starts with or equals pattern.

    Examples:
        >>> word_boundary_match("tit", "Movie Title")
        True
        >>> word_boundary_match("itle", "Movie Title")
        False
    """
    pattern = pattern.lower()
    for token in _tokens(text.lower()):
        if token.startswith(pattern) or token == pattern:
            return True
    return False


def _token_prefix_match(pattern: str, text: str) -> bool:
    pattern = pattern.lower()
    return any(
        len(token) > len(pattern) and token.startswith(pattern)
        for token in _tokens(text.lower())
    )


def fuzzy_match(pattern: str, text: str) -> bool:
    """
    Gap-tolerant in-order subsequence match on normalized strings.

    Pattern characters are located left to right. A character is accepted when
    its next occurrence lies at most FUZZY_MAX_GAP positions after the previous
    match, or failing that, inside a bounded window of FUZZY_MAX_GAP + 2
    positions after it. The first character that cannot be placed ends the
    scan: the remaining pattern characters are not tried.

    The match succeeds when at least max(3, ceil(0.7 * len(pattern)))
    characters were accepted.

    Args:
        pattern: Normalized, lowercased query
        text: Normalized, lowercased candidate name

    Examples:
        >>> fuzzy_match("test", "tepmst")
        True
        >>> fuzzy_match("test", "txxxxxxest")
        False
    """
    pattern_length = len(pattern)
    text_length = len(text)
    if pattern_length > text_length:
        return False

    # ceil(0.7 * P) without float rounding
    required = max(FUZZY_MIN_MATCHES, (7 * pattern_length + 9) // 10)
    matched = 0
    last_pos = -2  # lets the first character match at index 0 or 1

    for ch in pattern:
        start = max(0, last_pos + 1)
        pos = text.find(ch, start)
        if pos != -1 and pos - last_pos <= FUZZY_MAX_GAP:
            matched += 1
            last_pos = pos
            continue

        window_end = min(text_length, start + FUZZY_MAX_GAP + 2)
        pos = text.find(ch, start, window_end)
        if pos == -1:
            break
        matched += 1
        last_pos = pos

    return matched >= required


def score(
    query: str,
    cleaned_name: str,
    original_stem: str,
    transliterator: Optional[BaseTransliterator] = None
) -> int:
    """
    Relevance score of one candidate for a query.

    Args:
        query: Non-empty search query
        cleaned_name: Candidate stem with tags stripped
        original_stem: Candidate filename without extension
        transliterator: Strategy for the fuzzy tier (default: configured one)

    Returns:
        One of the SCORE_* constants (SCORE_NONE when nothing matches)

    Examples:
        >>> score("Mov", "Movie Title", "Movie Title [[Films]]")
        900
        >>> score("ovie", "Movie Title", "Movie Title")
        700
    """
    q = query.lower()
    name = cleaned_name.lower()

    if name == q or original_stem.lower() == q:
        return SCORE_EXACT

    if name.startswith(q):
        return SCORE_PREFIX

    if re.search(r"\b" + re.escape(q) + r"\b", name):
        return SCORE_WHOLE_WORD

    if q in name:
        return SCORE_SUBSTRING

    if word_boundary_match(q, name):
        return SCORE_WORD_BOUNDARY

    if _token_prefix_match(q, name):
        return SCORE_TOKEN_PREFIX

    if len(query) >= FUZZY_MIN_QUERY_LENGTH:
        normalized_query = normalize(query, transliterator).lower()
        normalized_name = normalize(cleaned_name, transliterator).lower()
        if fuzzy_match(normalized_query, normalized_name):
            return SCORE_FUZZY

    return SCORE_NONE
