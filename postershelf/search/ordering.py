"""
Default (non-search) display order of the poster collection.

Two total orders over the tag-stripped names:
- DATE_ADDED: newest ingestion timestamp first, untimestamped posters last
  (alphabetical among themselves)
- ALPHABETICAL: natural, case-insensitive order ("Season 2" before
  "Season 10"), optionally ignoring a leading "The", "A" or "An"
"""

import re
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from ..config import DisplayConfig
from ..models import PosterItem, SortMode
from .tags import cleaned_name, extract_timestamp

_LEADING_ARTICLE = re.compile(r"^(?:the|an|a) ", re.IGNORECASE)
_DIGIT_RUNS = re.compile(r"(\d+)")


def natural_key(text: str) -> List[Any]:
    """
    Sort key for natural, case-insensitive ordering.

    Digit runs become ints, the rest lowercase strings; re.split with a
    capturing group keeps strings at even and ints at odd positions, so keys
    of different texts always compare type-compatibly.

    Example:
        >>> sorted(["Season 10", "Season 2"], key=natural_key)
        ['Season 2', 'Season 10']
    """
    return [
        int(fragment) if index % 2 else fragment.lower()
        for index, fragment in enumerate(_DIGIT_RUNS.split(text))
    ]


def strip_leading_article(name: str) -> str:
    """Remove a single leading "The ", "A " or "An " (any casing)."""
    return _LEADING_ARTICLE.sub("", name, count=1)


def sort_key_name(item: PosterItem, ignore_articles: bool) -> str:
    """Comparison name of a poster for alphabetical ordering."""
    name = cleaned_name(item.filename)
    if ignore_articles:
        name = strip_leading_article(name)
    return name


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_alphabetical(a: PosterItem, b: PosterItem, ignore_articles: bool) -> int:
    return _cmp(
        natural_key(sort_key_name(a, ignore_articles)),
        natural_key(sort_key_name(b, ignore_articles)),
    )


def compare(a: PosterItem, b: PosterItem, mode: SortMode, ignore_articles: bool) -> int:
    """
    Three-way comparison of two posters for the default display order.

    Args:
        a, b: Posters to compare
        mode: SortMode.DATE_ADDED or SortMode.ALPHABETICAL
        ignore_articles: Fold leading articles in alphabetical comparisons

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equivalent
    """
    if mode == SortMode.DATE_ADDED:
        ts_a = extract_timestamp(a.filename)
        ts_b = extract_timestamp(b.filename)
        if ts_a is not None and ts_b is not None:
            # Newest first
            return _cmp(ts_b, ts_a)
        if ts_a is not None:
            return -1
        if ts_b is not None:
            return 1

    return _compare_alphabetical(a, b, ignore_articles)


def resolve_mode(config: DisplayConfig, mode: Optional[SortMode] = None) -> SortMode:
    """Per-request mode if given, else the configured default."""
    if mode is not None:
        return mode
    return SortMode.DATE_ADDED if config.sort_by_date_added else SortMode.ALPHABETICAL


def sort_posters(
    items: Sequence[PosterItem],
    config: DisplayConfig,
    mode: Optional[SortMode] = None
) -> List[PosterItem]:
    """
    Posters in default display order (stable).

    Args:
        items: Posters to order
        config: Display configuration (default mode, article folding)
        mode: Per-request override of config.sort_by_date_added

    Returns:
        New list in display order
    """
    resolved = resolve_mode(config, mode)
    ignore_articles = config.ignore_articles_in_sort
    return sorted(
        items,
        key=cmp_to_key(lambda a, b: compare(a, b, resolved, ignore_articles)),
    )
