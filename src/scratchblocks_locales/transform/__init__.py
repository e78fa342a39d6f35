"""Turning parsed catalogs into scratchblocks locale records."""

from .aliases import add_end, get_end_block, warn_missing_aliases
from .extractor import (
    LocaleTranslation,
    get_when_distance,
    transform_translation,
    translate,
)

__all__ = [
    "LocaleTranslation",
    "add_end",
    "get_end_block",
    "get_when_distance",
    "transform_translation",
    "translate",
    "warn_missing_aliases",
]
