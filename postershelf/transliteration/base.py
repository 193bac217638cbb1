"""
Abstract base class for transliteration strategies.

All transliterators must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod


class BaseTransliterator(ABC):
    """
    Folds accented/diacritic letters to their closest ASCII base letters.

    Implementations may differ in coverage for rare characters, but must agree
    on Western European letters (é -> e, ß -> ss, æ -> ae, ...).
    """

    name: str = "base"

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """
        Transliterate text to ASCII where a mapping exists.

        Characters without a mapping are returned unchanged; no case folding
        is applied.

        Args:
            text: Input text (any Unicode)

        Returns:
            Transliterated text
        """
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name}>"
