"""Downloading translation catalogs."""

from .fetcher import FetchedTranslations, TranslationFetcher

__all__ = ["FetchedTranslations", "TranslationFetcher"]
