"""
Removal of metadata embedded in poster filenames.

Filename conventions written by the importers:
- Status markers:        --Plex--, --Orphaned--
- Library tag:           [[Movies 4K]]
- Identifier tag:        [a1b2c3]
- Ingestion timestamp:   (A1700000000)   (8-12 digits)

Rules run in the order of STRIP_RULES so that a library tag is never
half-consumed by the identifier-tag rule.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

STATUS_MARKERS = ("--Plex--", "--Orphaned--")
PLEX_MARKER = "--plex--"  # lowercase form for case-insensitive checks


@dataclass(frozen=True)
class StripRule:
    """Named regex substitution applied to a filename stem"""
    name: str
    pattern: Pattern
    replacement: str


STATUS_MARKER_PATTERN = re.compile("|".join(re.escape(m) for m in STATUS_MARKERS))
LIBRARY_TAG_PATTERN = re.compile(r"\[\[.*?\]\]", re.DOTALL)
IDENTIFIER_TAG_PATTERN = re.compile(r"\[.*?\]", re.DOTALL)
TIMESTAMP_PATTERN = re.compile(r"\(A(\d{8,12})\)")
_WHITESPACE = re.compile(r"\s+")

STRIP_RULES: Tuple[StripRule, ...] = (
    StripRule("status_marker", STATUS_MARKER_PATTERN, ""),
    StripRule("library_tag", LIBRARY_TAG_PATTERN, ""),
    StripRule("identifier_tag", IDENTIFIER_TAG_PATTERN, ""),
    # Space, not empty: "Alien(A1700000000)Covenant" must stay two words
    StripRule("ingestion_timestamp", TIMESTAMP_PATTERN, " "),
)


def _apply_rules(text: str) -> str:
    for rule in STRIP_RULES:
        text = rule.pattern.sub(rule.replacement, text)
    return _WHITESPACE.sub(" ", text).strip()


def strip_tags(stem: str) -> str:
    """
    Strip status markers, bracket tags and timestamps from a filename stem.

    The rule pass repeats until nothing changes, so removing one token can
    never leave behind a newly formed one (e.g. "--Pl[x]ex--").

    Args:
        stem: Filename without extension

    Returns:
        Cleaned display name with collapsed whitespace

    Examples:
        >>> strip_tags("Movie Title [[Library A]] [abc123] (A1700000000)")
        'Movie Title'
        >>> strip_tags("Alien --Plex--")
        'Alien'
    """
    if not stem:
        return ""

    previous = None
    text = stem
    while text != previous:
        previous = text
        text = _apply_rules(text)
    return text


def filename_stem(filename: str) -> str:
    """Filename minus its extension, whatever the extension is."""
    stem, _ = os.path.splitext(filename)
    return stem


def cleaned_name(filename: str) -> str:
    """Display/comparison name of a poster file."""
    return strip_tags(filename_stem(filename))


def extract_timestamp(filename: str) -> Optional[int]:
    """
    Ingestion timestamp embedded in a filename, if any.

    Examples:
        >>> extract_timestamp("Alien (A1700000000).jpg")
        1700000000
        >>> extract_timestamp("Alien.jpg") is None
        True
    """
    match = TIMESTAMP_PATTERN.search(filename)
    if not match:
        return None
    return int(match.group(1))


def is_plex_tagged(filename: str) -> bool:
    """True if the filename carries the Plex status marker (any casing)."""
    return PLEX_MARKER in filename.lower()
