"""
General-purpose Unicode transliteration via the unidecode library.

Covers far more than Latin scripts (Greek, Cyrillic, CJK romanization), so it
is the default strategy.
"""

from unidecode import unidecode

from .base import BaseTransliterator


class UnidecodeTransliterator(BaseTransliterator):
    """Transliterator backed by unidecode"""

    name = "unidecode"

    def transliterate(self, text: str) -> str:
        """
        Examples:
            >>> UnidecodeTransliterator().transliterate("Amélie Poulain")
            'Amelie Poulain'
            >>> UnidecodeTransliterator().transliterate("Straße")
            'Strasse'
        """
        if not text:
            return ""
        return unidecode(text)
