"""
Catalog fetcher for the translation server.

This module provides an async HTTP client that downloads the ``editor`` and
``blocks`` catalogs of one language and parses them into lookup tables.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, NamedTuple

import httpx

from ..po import parse_po
from ..utils.core.exceptions import CatalogStatusError, FetchError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

EDITOR_CATALOG: Final[str] = "editor/editor.po"
BLOCKS_CATALOG: Final[str] = "blocks/blocks.po"


class FetchedTranslations(NamedTuple):
    """Parsed catalogs of one language."""

    language: str
    editor: dict[str, str]
    blocks: dict[str, str]


class TranslationFetcher:
    """Async fetcher for the per-language .po catalogs."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_attempts: int = 2,
        user_agent: str = "scratchblocks-locales/1.0",
    ) -> None:
        """Initialize TranslationFetcher with connection parameters."""
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self.max_attempts: int = max_attempts
        self.user_agent: str = user_agent
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TranslationFetcher:
        """Enter async context and initialize HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def catalog_url(self, language: str, catalog: str) -> str:
        """Build the download URL of ``catalog`` for ``language``."""
        return f"{self.base_url}/{language}/{catalog}"

    async def _fetch_catalog(self, url: str) -> dict[str, str]:
        """Download one catalog and parse it."""
        if self._client is None:
            raise RuntimeError(
                "TranslationFetcher not initialized. Use as async context manager."
            )

        response = await self._client.get(url)
        if not response.is_success:
            raise CatalogStatusError(url, response.status_code, response.reason_phrase)
        return parse_po(response.text)

    async def fetch(self, language: str) -> FetchedTranslations:
        """
        Fetch the editor and blocks catalogs of ``language``.

        Both catalogs are downloaded one after the other. If either request
        fails, the pair is downloaded again until ``max_attempts`` is
        exhausted.

        Args:
            language: Language code used as URL path segment

        Returns:
            FetchedTranslations with both parsed catalogs

        Raises:
            FetchError: If every attempt failed
        """
        last_error: Exception | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                editor = await self._fetch_catalog(
                    self.catalog_url(language, EDITOR_CATALOG)
                )
                blocks = await self._fetch_catalog(
                    self.catalog_url(language, BLOCKS_CATALOG)
                )
            except (httpx.HTTPError, CatalogStatusError) as e:
                last_error = e
                if attempt < self.max_attempts:
                    logger.warning(
                        f"Fetching {language} failed (attempt {attempt}/{self.max_attempts}), retrying: {e}"
                    )
                continue

            logger.debug(
                f"Fetched {language}: {len(editor)} editor and {len(blocks)} blocks entries"
            )
            return FetchedTranslations(language=language, editor=editor, blocks=blocks)

        raise FetchError(language, last_error or "no attempt made")
