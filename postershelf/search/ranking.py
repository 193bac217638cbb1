"""
Search filtering and relevance ranking over the full poster collection.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from ..models import PosterItem
from ..transliteration import BaseTransliterator, get_transliterator
from .scorer import SCORE_NONE, score
from .tags import filename_stem, is_plex_tagged, strip_tags

logger = logging.getLogger(__name__)

ORPHAN_QUERY = "orphaned"


def _score_item(item: PosterItem, query: str, transliterator: BaseTransliterator) -> int:
    stem = filename_stem(item.filename)
    return score(query, strip_tags(stem), stem, transliterator)


def filter_orphans(items: Sequence[PosterItem]) -> List[PosterItem]:
    """Items without the Plex status marker, in input order."""
    return [item for item in items if not is_plex_tagged(item.filename)]


def filter_and_rank(
    items: Sequence[PosterItem],
    query: str,
    transliterator: Optional[BaseTransliterator] = None,
    max_workers: Optional[int] = None
) -> List[PosterItem]:
    """
    Filter posters by a search query and order them by relevance.

    Process:
    1. Empty/whitespace query → items returned as-is
    2. "orphaned" (any casing) → posters lacking --Plex--, scorer bypassed
    3. Otherwise score every poster, drop score 0, sort by score descending

    Ties keep their input order (stable sort), so the output is deterministic.

    Args:
        items: Candidate posters
        query: Raw user query (untrimmed)
        transliterator: Strategy for the fuzzy tier (default: configured one)
        max_workers: Score in a thread pool of this size (default: sequential)

    Returns:
        Matching posters in display order; scores are not exposed

    Example:
        >>> items = [PosterItem("Alien Covenant.jpg", "movies"), PosterItem("Alien.jpg", "movies")]
        >>> [i.filename for i in filter_and_rank(items, "alien")]
        ['Alien.jpg', 'Alien Covenant.jpg']
    """
    query = (query or "").strip()
    if not query:
        return list(items)

    if query.lower() == ORPHAN_QUERY:
        orphans = filter_orphans(items)
        logger.debug(f"Orphan filter: {len(orphans)}/{len(items)} posters without Plex marker")
        return orphans

    if transliterator is None:
        transliterator = get_transliterator()

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scores = list(executor.map(lambda item: _score_item(item, query, transliterator), items))
    else:
        scores = [_score_item(item, query, transliterator) for item in items]

    scored: List[Tuple[PosterItem, int]] = [
        (item, item_score) for item, item_score in zip(items, scores)
        if item_score > SCORE_NONE
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(f"Search '{query}': {len(scored)}/{len(items)} posters matched")

    return [item for item, _ in scored]
