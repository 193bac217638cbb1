"""
Factory to create the transliterator instance based on configuration.
"""

from typing import Optional
import os
import logging

from .base import BaseTransliterator
from .native import UnidecodeTransliterator
from .table import TableTransliterator

logger = logging.getLogger(__name__)

DEFAULT_TRANSLITERATOR = "unidecode"


class TransliteratorFactory:
    """Factory to create transliterator instances based on configuration."""

    _instance: Optional[BaseTransliterator] = None  # Singleton cache

    @classmethod
    def create(cls, transliterator_type: Optional[str] = None, force_reload: bool = False) -> BaseTransliterator:
        """
        Create transliterator, selected once per process.

        Config (env vars):
            TRANSLITERATOR_TYPE: "unidecode" | "table" (default: unidecode)

        Supported types:
            - unidecode: General-purpose Unicode transliteration (default)
            - table: Static Latin-1 / Latin Extended-A table, no dependency

        Args:
            transliterator_type: Explicit type, overrides TRANSLITERATOR_TYPE
            force_reload: If True, recreate instance even if cached

        Returns:
            Transliterator instance

        Raises:
            ValueError: Unknown transliterator type
        """
        if cls._instance is not None and not force_reload:
            if not transliterator_type or transliterator_type.strip().lower() == cls._instance.name:
                return cls._instance

        if not transliterator_type:
            transliterator_type = os.getenv("TRANSLITERATOR_TYPE") or DEFAULT_TRANSLITERATOR
        transliterator_type = transliterator_type.strip().lower()

        if transliterator_type == "unidecode":
            instance = UnidecodeTransliterator()
        elif transliterator_type == "table":
            instance = TableTransliterator()
        else:
            logger.error(f"Unknown transliterator type: {transliterator_type}")
            raise ValueError(
                f"Unknown transliterator type: {transliterator_type}. "
                f"Valid options: unidecode, table"
            )

        logger.info(f"Using transliterator: {instance.name}")
        cls._instance = instance
        return cls._instance

    @classmethod
    def cleanup(cls):
        """Drop cached transliterator instance."""
        cls._instance = None
