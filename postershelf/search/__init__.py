"""
Poster search, relevance ranking and display ordering.

Components:
- normalizer: diacritic folding + punctuation removal
- tags: stripping of status markers, library/id tags and timestamps
- scorer: seven-tier relevance score with gap-tolerant fuzzy matching
- ranking: query filtering and stable score-descending ordering
- ordering: default date-added / natural alphabetical orders

A request takes exactly one path: a non-empty query is ranked by relevance
only; without a query the collection gets the default display order.
"""

from typing import List, Optional, Sequence

from ..config import DisplayConfig
from ..models import PosterItem, SortMode
from ..transliteration import BaseTransliterator
from .normalizer import normalize
from .tags import strip_tags, cleaned_name, filename_stem, extract_timestamp
from .scorer import score, word_boundary_match, fuzzy_match
from .ranking import filter_and_rank
from .ordering import compare, sort_posters, natural_key


def arrange_posters(
    items: Sequence[PosterItem],
    query: str,
    config: DisplayConfig,
    mode: Optional[SortMode] = None,
    transliterator: Optional[BaseTransliterator] = None
) -> List[PosterItem]:
    """
    Final display order for one request.

    Args:
        items: Candidate posters
        query: Raw search query ("" for the default listing)
        config: Display configuration
        mode: Per-request sort override (ignored when searching)
        transliterator: Strategy for fuzzy matching (default: configured one)
    """
    if query and query.strip():
        return filter_and_rank(items, query, transliterator)
    return sort_posters(items, config, mode)


__all__ = [
    "normalize",
    "strip_tags",
    "cleaned_name",
    "filename_stem",
    "extract_timestamp",
    "score",
    "word_boundary_match",
    "fuzzy_match",
    "filter_and_rank",
    "compare",
    "sort_posters",
    "natural_key",
    "arrange_posters",
]
