"""
Poster catalog on disk.

Enumerates the configured poster directories into PosterItem records (the
input of the search engine), and provides the listing helpers around it:
directory display names and pagination.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .config import CatalogConfig
from .models import PosterItem
from .search.ordering import natural_key

logger = logging.getLogger(__name__)


@dataclass
class PosterPage:
    """One page of a listing"""
    items: List[PosterItem]
    page: int          # 1-based, clamped into [1, max(1, total_pages)]
    total_pages: int
    total: int


def is_allowed_file_type(filename: str, allowed_extensions: Iterable[str]) -> bool:
    """Case-insensitive extension allow-list check ("Poster.JPG" is a jpg)."""
    _, ext = os.path.splitext(filename)
    return ext[1:].lower() in allowed_extensions


def format_directory_name(key: str) -> str:
    """
    Human-readable name of a directory key.

    Examples:
        >>> format_directory_name("tv-seasons")
        'TV Seasons'
        >>> format_directory_name("collections")
        'Collections'
    """
    text = key.replace("-", " ")
    if text.lower().startswith("tv"):
        return "TV " + text[3:].title()
    return text.title()


def _scan_directory(config: CatalogConfig, key: str) -> List[PosterItem]:
    path = config.directory_path(key)
    if not path.is_dir():
        logger.warning(f"Poster directory missing, skipped: {path}")
        return []

    try:
        entries = sorted(os.listdir(path))
    except OSError as e:
        logger.warning(f"Cannot read poster directory {path}: {e}")
        return []

    return [
        PosterItem(filename=name, directory=key)
        for name in entries
        if is_allowed_file_type(name, config.allowed_extensions)
        and (path / name).is_file()
    ]


def list_posters(config: CatalogConfig, directory: str = "") -> List[PosterItem]:
    """
    Enumerate posters of one directory key, or of all directories.

    Unknown directory keys fall back to listing everything.

    Args:
        config: Catalog configuration
        directory: Directory key filter ("" = all)

    Returns:
        Posters in natural, case-insensitive filename order
    """
    if directory and directory not in config.directories:
        logger.info(f"Unknown directory filter '{directory}', listing all directories")
        directory = ""

    keys = [directory] if directory else list(config.directories)

    posters: List[PosterItem] = []
    for key in keys:
        posters.extend(_scan_directory(config, key))

    posters.sort(key=lambda item: natural_key(item.filename))
    logger.debug(f"Catalog listing: {len(posters)} posters from {len(keys)} directories")
    return posters


def paginate(items: Sequence[PosterItem], page: int, per_page: int) -> PosterPage:
    """
    Slice one page out of an ordered listing.

    Example:
        >>> paginate(items_50, page=9, per_page=24).page
        3
    """
    total = len(items)
    total_pages = math.ceil(total / per_page) if per_page > 0 else 0
    page = max(1, page)
    page = min(page, max(1, total_pages))
    start = (page - 1) * per_page
    return PosterPage(
        items=list(items[start:start + per_page]),
        page=page,
        total_pages=total_pages,
        total=total,
    )
