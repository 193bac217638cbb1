"""Unit test configuration - isolated environment and fresh singletons"""

import pytest

from postershelf.models import PosterItem
from postershelf.transliteration import TransliteratorFactory

CONFIG_ENV_VARS = (
    "POSTER_ROOT",
    "IMAGES_PER_PAGE",
    "SORT_BY_DATE_ADDED",
    "IGNORE_ARTICLES_IN_SORT",
    "TRANSLITERATOR_TYPE",
    "SITE_TITLE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """
    Remove configuration variables from the environment and reset the
    transliterator singleton, so a developer's .env or shell settings
    never leak into unit tests.
    """
    for key in CONFIG_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    TransliteratorFactory.cleanup()
    yield
    TransliteratorFactory.cleanup()


@pytest.fixture
def posters():
    """Factory: build PosterItem list from filenames (directory 'movies')"""
    def _build(*filenames, directory="movies"):
        return [PosterItem(filename=name, directory=directory) for name in filenames]
    return _build
