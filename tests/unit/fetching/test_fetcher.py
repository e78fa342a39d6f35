"""Tests for the catalog fetcher."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from scratchblocks_locales.fetching import FetchedTranslations, TranslationFetcher
from scratchblocks_locales.utils.core.exceptions import CatalogStatusError, FetchError

EDITOR_URL = "http://translate.example.org/download/de/editor/editor.po"
BLOCKS_URL = "http://translate.example.org/download/de/blocks/blocks.po"


def po_response(content: str, status_code: int = 200) -> httpx.Response:
    """Build a response carrying a .po body."""
    return httpx.Response(status_code, text=content)


class TestTranslationFetcher:
    """Test cases for TranslationFetcher functionality."""

    @pytest.fixture
    def fetcher(self) -> TranslationFetcher:
        """Create a TranslationFetcher instance for testing."""
        return TranslationFetcher(
            base_url="http://translate.example.org/download/",
            timeout=5.0,
            max_attempts=2,
        )

    def test_init_strips_trailing_slash(self, fetcher: TranslationFetcher) -> None:
        """Test that trailing slash is stripped from base URL."""
        assert fetcher.base_url == "http://translate.example.org/download"
        assert fetcher._client is None

    def test_init_rejects_zero_attempts(self) -> None:
        """Test that at least one attempt is required."""
        with pytest.raises(ValueError, match="max_attempts"):
            _ = TranslationFetcher(base_url="http://localhost", max_attempts=0)

    def test_catalog_url(self, fetcher: TranslationFetcher) -> None:
        """Test URL templating with the language code."""
        assert fetcher.catalog_url("de", "editor/editor.po") == EDITOR_URL

    @pytest.mark.asyncio
    async def test_context_manager(self, fetcher: TranslationFetcher) -> None:
        """Test async context manager functionality."""
        async with fetcher as active:
            assert isinstance(active._client, httpx.AsyncClient)

        assert fetcher._client is None

    @pytest.mark.asyncio
    async def test_fetch_not_initialized(self, fetcher: TranslationFetcher) -> None:
        """Test that fetching outside the context is a programming error."""
        with pytest.raises(RuntimeError, match="not initialized"):
            _ = await fetcher.fetch("de")

    @pytest.mark.asyncio
    async def test_fetch_success(
        self, fetcher: TranslationFetcher, editor_po: str, blocks_po: str
    ) -> None:
        """Test that both catalogs are requested in order and parsed."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value = mock_client
            mock_client.get.side_effect = [po_response(editor_po), po_response(blocks_po)]

            async with fetcher:
                result = await fetcher.fetch("de")

        assert isinstance(result, FetchedTranslations)
        assert result.language == "de"
        assert result.editor["abs"] == "Betrag"
        assert result.blocks["say %s"] == "sage %s"
        requested = [call.args[0] for call in mock_client.get.call_args_list]
        assert requested == [EDITOR_URL, BLOCKS_URL]

    @pytest.mark.asyncio
    async def test_retry_after_status_error(
        self, fetcher: TranslationFetcher, editor_po: str, blocks_po: str
    ) -> None:
        """Test that a failing blocks download repeats the whole pair once."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value = mock_client
            mock_client.get.side_effect = [
                po_response(editor_po),
                po_response("", status_code=503),
                po_response(editor_po),
                po_response(blocks_po),
            ]

            async with fetcher:
                result = await fetcher.fetch("de")

        assert mock_client.get.call_count == 4
        requested = [call.args[0] for call in mock_client.get.call_args_list]
        assert requested == [EDITOR_URL, BLOCKS_URL, EDITOR_URL, BLOCKS_URL]
        assert result.blocks["move %n steps"] == "gehe %n er Schritt"

    @pytest.mark.asyncio
    async def test_retry_after_transport_error(
        self, fetcher: TranslationFetcher, editor_po: str, blocks_po: str
    ) -> None:
        """Test that connection errors are retried like bad statuses."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value = mock_client
            mock_client.get.side_effect = [
                httpx.ConnectError("connection refused"),
                po_response(editor_po),
                po_response(blocks_po),
            ]

            async with fetcher:
                result = await fetcher.fetch("de")

        assert mock_client.get.call_count == 3
        assert result.editor["Looks"] == "Aussehen"

    @pytest.mark.asyncio
    async def test_second_failure_raises_fetch_error(
        self, fetcher: TranslationFetcher
    ) -> None:
        """Test that two failed attempts raise a descriptive error."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value = mock_client
            mock_client.get.return_value = po_response("", status_code=404)

            async with fetcher:
                with pytest.raises(FetchError) as exc_info:
                    _ = await fetcher.fetch("de")

        error = exc_info.value
        assert mock_client.get.call_count == 2
        assert error.language == "de"
        assert isinstance(error.cause, CatalogStatusError)
        assert "Fetching de failed" in str(error)
        assert "404 Not Found" in str(error)
        assert EDITOR_URL in str(error)

    @pytest.mark.asyncio
    async def test_single_attempt_does_not_retry(self, editor_po: str) -> None:
        """Test that max_attempts bounds the retry loop."""
        fetcher = TranslationFetcher(base_url="http://localhost", max_attempts=1)

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value = mock_client
            mock_client.get.side_effect = httpx.ReadTimeout("timed out")

            async with fetcher:
                with pytest.raises(FetchError, match="timed out"):
                    _ = await fetcher.fetch("fr")

        assert mock_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_fetch_follows_redirects(self, fetcher: TranslationFetcher) -> None:
        """Test that an http to https redirect yields the final catalog."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.scheme == "http":
                return httpx.Response(
                    301, headers={"Location": str(request.url.copy_with(scheme="https"))}
                )
            return httpx.Response(200, text='msgid "Looks"\nmsgstr "Aussehen"\n')

        real_client = httpx.AsyncClient
        transport = httpx.MockTransport(handler)

        def client_with_transport(**kwargs: object) -> httpx.AsyncClient:
            return real_client(transport=transport, **kwargs)  # pyright: ignore[reportArgumentType]

        with patch("httpx.AsyncClient", side_effect=client_with_transport) as mock_client_class:
            async with fetcher:
                result = await fetcher.fetch("de")

        assert mock_client_class.call_args.kwargs["follow_redirects"] is True
        assert result.editor == {"Looks": "Aussehen"}
        assert result.blocks == {"Looks": "Aussehen"}
