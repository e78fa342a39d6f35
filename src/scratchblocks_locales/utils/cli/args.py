"""
Command-line argument parsing for scratchblocks-locales.

    scratchblocks-locales [language code | all]

No language fetches the forum languages, ``all`` fetches every supported
language.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import NamedTuple

from ...tables.languages import ALL_KEYWORD, ALL_LANGS, FORUM_LANGS, is_supported


class UsageError(Exception):
    """Raised when help is requested or the arguments cannot be used."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    language: str | None
    config_file: Path | None
    locales_dir: Path | None
    base_url: str | None
    verbose: bool


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser.

    ``--help`` is handled by :func:`parse_arguments` so that it exits with a
    non-zero status like every other usage problem.
    """
    parser = argparse.ArgumentParser(
        prog="scratchblocks-locales",
        description="Fetches scratchblocks translations from translate.scratch.mit.edu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
If no language code is given, translations for forum languages will be fetched.

Examples:
  scratchblocks-locales
    Fetch the forum languages

  scratchblocks-locales all
    Fetch every supported language

  scratchblocks-locales de --locales-dir build/locales
    Fetch German into a custom directory
""",
    )

    _ = parser.add_argument(
        "language",
        nargs="*",
        metavar="LANGUAGE",
        help="Language code to fetch, or 'all'",
    )
    _ = parser.add_argument(
        "-h", "--help", action="store_true", help="Show this help message and exit"
    )
    _ = parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="YAML file with base_url, locales_dir, timeout, max_attempts",
    )
    _ = parser.add_argument(
        "--locales-dir",
        type=Path,
        default=None,
        metavar="PATH",
        help="Directory the <language>.json files are written to",
    )
    _ = parser.add_argument(
        "--base-url",
        default=None,
        metavar="URL",
        help="Download root of the translation server",
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Raises:
        UsageError: If help was requested or more than one language was given
        SystemExit: If argparse rejects an option
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    languages: list[str] = getattr(parsed, "language", [])
    if getattr(parsed, "help", False):
        raise UsageError("help requested")
    if len(languages) > 1:
        raise UsageError(f"expected at most one language, got {len(languages)}")

    return ParsedArgs(
        language=languages[0] if languages else None,
        config_file=getattr(parsed, "config_file", None),
        locales_dir=getattr(parsed, "locales_dir", None),
        base_url=getattr(parsed, "base_url", None),
        verbose=bool(getattr(parsed, "verbose", False)),
    )


def resolve_languages(language: str | None) -> tuple[str, ...] | None:
    """
    Map the positional argument to the languages to build.

    Returns:
        The forum languages for None, every language for ``all``, the single
        language when supported, and None for an unsupported code
    """
    if language is None:
        return FORUM_LANGS
    if language == ALL_KEYWORD:
        return ALL_LANGS
    if is_supported(language):
        return (language,)
    return None
