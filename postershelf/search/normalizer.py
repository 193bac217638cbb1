"""
Text normalization for accent-insensitive matching.

Pipeline:
1. Transliterate diacritics to ASCII ("é" → "e", "ß" → "ss", "æ" → "ae")
2. Drop every character that is not a Unicode letter, digit or whitespace

No case folding happens here; callers lowercase as needed.
"""

import unicodedata
from typing import Optional

from ..transliteration import BaseTransliterator, get_transliterator


def _is_kept(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd" or ch.isspace()


def normalize(text: str, transliterator: Optional[BaseTransliterator] = None) -> str:
    """
    Normalize text for fuzzy comparison.

    Args:
        text: Input text
        transliterator: Strategy to fold diacritics (default: configured one)

    Returns:
        Folded text containing only letters, digits and whitespace

    Examples:
        >>> normalize("Café – François")
        'Cafe  Francois'
        >>> normalize("")
        ''
    """
    if not text:
        return ""

    if transliterator is None:
        transliterator = get_transliterator()

    folded = transliterator.transliterate(text)
    return "".join(ch for ch in folded if _is_kept(ch))
