"""
Transliteration strategies for diacritic folding.

Usage:
    # Get transliterator (auto-configured from env):
    from postershelf.transliteration import get_transliterator

    transliterator = get_transliterator()
    transliterator.transliterate("Amélie")  # 'Amelie'

    # Or create specific implementation:
    from postershelf.transliteration import TableTransliterator

    transliterator = TableTransliterator()
"""

from typing import Optional
from .base import BaseTransliterator
from .native import UnidecodeTransliterator
from .table import TableTransliterator, TRANSLITERATION_TABLE
from .factory import TransliteratorFactory


def get_transliterator(transliterator_type: Optional[str] = None, force_reload: bool = False) -> BaseTransliterator:
    """
    Get configured transliterator instance (factory convenience function).

    Selected once from TRANSLITERATOR_TYPE and cached for the process.
    """
    return TransliteratorFactory.create(transliterator_type, force_reload=force_reload)


__all__ = [
    'BaseTransliterator',
    'UnidecodeTransliterator',
    'TableTransliterator',
    'TRANSLITERATION_TABLE',
    'TransliteratorFactory',
    'get_transliterator',
]
