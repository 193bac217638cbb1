"""
Application configuration from environment variables.

Loads .env.local (local dev) or .env (production) from the project root,
then reads plain environment variables. Values are validated by pydantic.

Variables:
    POSTER_ROOT              Root folder of the poster directories (default: posters)
    IMAGES_PER_PAGE          Page size for listings (default: 24)
    SORT_BY_DATE_ADDED       Newest first instead of alphabetical (default: false)
    IGNORE_ARTICLES_IN_SORT  Ignore leading The/A/An when sorting (default: true)
    TRANSLITERATOR_TYPE      unidecode | table (default: unidecode)
    SITE_TITLE               Service title (default: Posteria)
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_DIRECTORIES: Dict[str, str] = {
    "movies": "movies",
    "tv-shows": "tv-shows",
    "tv-seasons": "tv-seasons",
    "collections": "collections",
}
ALLOWED_EXTENSIONS: Tuple[str, ...] = ("jpg", "jpeg", "png", "webp")
TRUE_VALUES = ("true", "1", "yes")


class DisplayConfig(BaseModel):
    """Default display order settings"""
    sort_by_date_added: bool = Field(default=False, description="Newest first instead of alphabetical")
    ignore_articles_in_sort: bool = Field(default=True, description="Ignore leading The/A/An when sorting")


class CatalogConfig(BaseModel):
    """Where posters live and how they are listed"""
    poster_root: Path = Field(default=Path("posters"), description="Root folder of the poster directories")
    directories: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DIRECTORIES),
        description="Directory key → folder relative to poster_root"
    )
    allowed_extensions: Tuple[str, ...] = Field(default=ALLOWED_EXTENSIONS)
    images_per_page: int = Field(default=24, ge=1, description="Page size for listings")

    @field_validator("allowed_extensions")
    @classmethod
    def lowercase_extensions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(ext.lower().lstrip(".") for ext in value)

    def directory_path(self, key: str) -> Path:
        return self.poster_root / self.directories[key]


class AppConfig(BaseModel):
    site_title: str = "Posteria"
    transliterator: str = "unidecode"
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)


def load_env_files(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        Loaded file, or None when only system environment variables are used
    """
    env_local = root / ".env.local"
    env_file = root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            logger.info(f"Loaded environment from: {candidate}")
            return candidate

    logger.info("No .env.local or .env file found - using system environment variables only")
    return None


def get_env(key: str, default: str) -> str:
    value = os.getenv(key)
    return value if value is not None else default


def get_bool_env(key: str, default: bool) -> bool:
    """'true', '1', 'yes' (any casing) are true; any other set value is false."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def get_int_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.error(f"{key} must be an integer, got {value!r}")
        raise


def load_config(load_env: bool = True) -> AppConfig:
    """
    Build application configuration from the environment.

    Args:
        load_env: Read .env.local / .env before looking at os.environ

    Returns:
        Validated AppConfig

    Raises:
        ValueError: Malformed integer setting
        pydantic.ValidationError: Setting outside its allowed range
    """
    if load_env:
        load_env_files()

    config = AppConfig(
        site_title=get_env("SITE_TITLE", "Posteria"),
        transliterator=get_env("TRANSLITERATOR_TYPE", "unidecode"),
        display=DisplayConfig(
            sort_by_date_added=get_bool_env("SORT_BY_DATE_ADDED", False),
            ignore_articles_in_sort=get_bool_env("IGNORE_ARTICLES_IN_SORT", True),
        ),
        catalog=CatalogConfig(
            poster_root=Path(get_env("POSTER_ROOT", "posters")),
            images_per_page=get_int_env("IMAGES_PER_PAGE", 24),
        ),
    )
    logger.debug(f"Configuration loaded: {config.model_dump()}")
    return config
