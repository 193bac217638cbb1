"""
Postershelf - personal media-poster catalog.

Subpackages:
- search: normalization, tag stripping, relevance ranking and display ordering
- transliteration: swappable diacritic folding strategies
"""

APP_VERSION = "0.3.0"
