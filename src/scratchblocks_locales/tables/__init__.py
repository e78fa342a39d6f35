"""Static tables: supported languages, English specs and alias overrides."""

from .aliases import EXTRA_ALIASES
from .languages import ALL_LANGS, FORUM_LANGS, is_supported
from .specs import SpecTables, default_tables

__all__ = [
    "ALL_LANGS",
    "EXTRA_ALIASES",
    "FORUM_LANGS",
    "SpecTables",
    "default_tables",
    "is_supported",
]
