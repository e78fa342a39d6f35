"""
Main entry point for scratchblocks-locales.

Flow:
    - parse arguments and pick the languages
    - load configuration
    - clean the locales directory
    - fetch, add special cases, transform, report and write every language
"""

import asyncio
import logging
import sys

from rich.console import Console

from .config.manager import ConfigManager
from .pipeline import run_languages
from .tables.languages import ALL_LANGS
from .tables.specs import default_tables
from .utils.cli.args import (
    UsageError,
    create_argument_parser,
    parse_arguments,
    resolve_languages,
)
from .utils.console import create_console
from .utils.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the command-line run.

    Args:
        verbose: Enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Request lines from httpx are only interesting when debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def print_supported_languages(console: Console) -> None:
    """Print the guidance shown for an unknown language code."""
    console.print("Language code not valid, supported languages:", markup=False, emoji=False)
    console.print(", ".join(ALL_LANGS), markup=False, emoji=False, soft_wrap=True)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """
    Run the command line.

    Returns:
        Process exit status
    """
    console = console or create_console()

    try:
        args = parse_arguments(argv)
    except UsageError:
        create_argument_parser().print_help()
        return 1

    languages = resolve_languages(args.language)
    if languages is None:
        print_supported_languages(console)
        return 0

    setup_logging(args.verbose)

    try:
        config = ConfigManager.apply_overrides(
            ConfigManager.load_config(args.config_file),
            locales_dir=args.locales_dir,
            base_url=args.base_url,
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    logger.debug(f"Building {len(languages)} languages into {config.locales_dir}")
    _ = asyncio.run(run_languages(languages, config, default_tables(), console))
    return 0


if __name__ == "__main__":
    sys.exit(main())
