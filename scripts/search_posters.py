#!/usr/bin/env python3
"""
Search or list the poster catalog from the command line.

Uses the same configuration as the API (.env.local / .env / environment).

Usage:
    python scripts/search_posters.py                      # default order
    python scripts/search_posters.py "matrix"             # relevance ranked
    python scripts/search_posters.py orphaned --limit 20  # posters without --Plex--
    python scripts/search_posters.py --directory tv-seasons --sort date
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for postershelf imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from postershelf.catalog import list_posters
from postershelf.config import load_config
from postershelf.logging_config import setup_logging
from postershelf.models import SortMode
from postershelf.search import arrange_posters
from postershelf.transliteration import get_transliterator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Search or list posters in display order.")
    parser.add_argument("query", nargs="?", default="", help="Search query (omit for the default order)")
    parser.add_argument("--directory", default="", help="Directory key filter (movies, tv-shows, ...)")
    parser.add_argument("--sort", choices=[mode.value for mode in SortMode], default=None,
                        help="Override SORT_BY_DATE_ADDED for this listing")
    parser.add_argument("--limit", type=int, default=0, help="Print at most this many posters (0 = all)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on the console")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    # Results go to stdout, diagnostics to stderr
    setup_logging(
        log_file=None,
        console_level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    config = load_config()
    transliterator = get_transliterator(config.transliterator)

    items = list_posters(config.catalog, args.directory)
    mode = SortMode(args.sort) if args.sort else None
    ordered = arrange_posters(items, args.query, config.display, mode, transliterator)

    if args.limit > 0:
        ordered = ordered[:args.limit]

    for item in ordered:
        print(f"{item.directory}/{item.filename}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
