"""
Basic exception classes for scratchblocks-locales.

This module contains the exception classes shared by the fetch pipeline,
the configuration layer and the command-line interface.
"""

from __future__ import annotations


class LocalesError(Exception):
    """Base exception class for scratchblocks-locales errors."""


class FetchError(LocalesError):
    """Downloading the catalogs of one language failed on every attempt."""

    def __init__(self, language: str, cause: BaseException | str) -> None:
        super().__init__(f"Fetching {language} failed: {cause}")
        self.language: str = language
        self.cause: BaseException | str = cause


class CatalogStatusError(LocalesError):
    """A catalog request returned a non-success HTTP status."""

    def __init__(self, url: str, status_code: int, reason: str) -> None:
        super().__init__(f"Failed fetching {url} with code {status_code} {reason}.")
        self.url: str = url
        self.status_code: int = status_code


class ConfigurationError(LocalesError):
    """Configuration-related errors."""
