"""Configuration for scratchblocks-locales."""

from .manager import ConfigManager
from .schema import DEFAULT_BASE_URL, LocalesConfig

__all__ = ["ConfigManager", "DEFAULT_BASE_URL", "LocalesConfig"]
