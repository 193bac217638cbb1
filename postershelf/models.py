"""Core data models shared by the catalog, the search engine and the API"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PosterItem:
    """Single poster file as handed over by the catalog"""
    filename: str    # File name including extension, e.g. "Alien (A1700000000).jpg"
    directory: str   # Directory key ("movies", "tv-shows", ...), not a filesystem path


class SortMode(str, Enum):
    """Default (non-search) display order"""
    ALPHABETICAL = "alpha"
    DATE_ADDED = "date"
