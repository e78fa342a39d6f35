"""
Per-language processing pipeline.

Every requested language runs through the same ordered stages:

    fetch -> add_end -> transform -> report -> write

The languages are launched together on one event loop and share one HTTP
client. A failure is logged at the boundary of its own pipeline and never
reaches the others.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from .config.schema import LocalesConfig
from .fetching import TranslationFetcher
from .output import clean_locales, write_json
from .report import compute_coverage, print_coverage
from .tables.specs import SpecTables
from .transform import add_end, transform_translation
from .utils.core.exceptions import FetchError

logger = logging.getLogger(__name__)


async def run_language(
    language: str,
    fetcher: TranslationFetcher,
    tables: SpecTables,
    console: Console,
    locales_dir: Path,
) -> Path | None:
    """
    Build the locale file of one language.

    Returns:
        Path of the written file, or None if the pipeline failed
    """
    try:
        fetched = await fetcher.fetch(language)
        fetched = add_end(fetched, tables)
        translation = transform_translation(fetched, tables, console)
        print_coverage(compute_coverage(translation, tables), console)
        return write_json(translation, locales_dir)
    except FetchError as e:
        logger.error(str(e))
    except Exception as e:
        logger.exception(f"Building locale {language} failed: {e}")
    return None


async def run_languages(
    languages: Sequence[str],
    config: LocalesConfig,
    tables: SpecTables,
    console: Console,
) -> dict[str, Path | None]:
    """
    Clean the locales directory and build every language concurrently.

    Returns:
        Mapping of language code to written file (None where it failed)
    """
    _ = clean_locales(config.locales_dir)

    async with TranslationFetcher(
        base_url=config.base_url,
        timeout=config.timeout,
        max_attempts=config.max_attempts,
        user_agent=config.user_agent,
    ) as fetcher:
        results = await asyncio.gather(
            *(
                run_language(language, fetcher, tables, console, config.locales_dir)
                for language in languages
            )
        )

    written = sum(1 for path in results if path is not None)
    logger.info(f"Wrote {written} of {len(languages)} locale files")
    return dict(zip(languages, results))
