"""
Static lookup-table transliteration (no third-party dependency).

Covers the Latin-1 Supplement (U+00C0-U+00FF) and Latin Extended-A
(U+0100-U+017F) letters. Most entries are derived once at import time by
canonical decomposition (é = e + COMBINING ACUTE); letters that do not
decompose to an ASCII base (ligatures, stroked letters, eth/thorn, sharp s)
come from LIGATURES.
"""

import unicodedata
from typing import Dict, Optional

from .base import BaseTransliterator

LIGATURES: Dict[str, str] = {
    "Æ": "AE", "æ": "ae",
    "Œ": "OE", "œ": "oe",
    "Ĳ": "IJ", "ĳ": "ij",
    "ß": "ss",
    "Ø": "O", "ø": "o",
    "Ð": "D", "ð": "d",
    "Đ": "D", "đ": "d",
    "Þ": "TH", "þ": "th",
    "Ł": "L", "ł": "l",
    "Ŀ": "L", "ŀ": "l",
    "Ħ": "H", "ħ": "h",
    "Ŧ": "T", "ŧ": "t",
    "Ŋ": "N", "ŋ": "n",
    "ı": "i",
    "ĸ": "k",
    "ŉ": "n",
    "ſ": "s",
}

_TABLE_RANGE = range(0x00C0, 0x0180)


def _build_table() -> Dict[int, str]:
    table: Dict[int, str] = {}
    for codepoint in _TABLE_RANGE:
        ch = chr(codepoint)
        if ch in LIGATURES:
            table[codepoint] = LIGATURES[ch]
            continue
        decomposed = unicodedata.normalize("NFKD", ch)
        folded = "".join(c for c in decomposed if not unicodedata.combining(c))
        # × and ÷ live in this block too and have no letter base
        if folded and folded != ch and folded.isascii() and folded.isalpha():
            table[codepoint] = folded
    return table


TRANSLITERATION_TABLE = _build_table()


class TableTransliterator(BaseTransliterator):
    """Fallback transliterator using TRANSLITERATION_TABLE"""

    name = "table"

    def __init__(self, table: Optional[Dict[int, str]] = None):
        self.table = table if table is not None else TRANSLITERATION_TABLE

    def transliterate(self, text: str) -> str:
        if not text:
            return ""
        return text.translate(self.table)
