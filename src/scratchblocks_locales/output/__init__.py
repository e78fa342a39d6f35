"""Locale file output."""

from .writer import clean_locales, locale_path, write_json

__all__ = ["clean_locales", "locale_path", "write_json"]
