"""
Special cases derived from the alias overrides.

The catalogs do not contain the script terminator, so its localized form is
taken from the alias table. Languages whose alias table lacks the phrases
needed to tell turn directions and the green flag apart get a warning.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console

from ..fetching import FetchedTranslations
from ..tables.aliases import END
from ..tables.specs import SpecTables
from ..utils.console import print_warning


def get_end_block(aliases: Mapping[str, str] | None) -> str:
    """
    Get the localized end block from an alias table.

    Returns:
        The localized phrase aliased to ``end``, or an empty string
    """
    if not aliases:
        return ""
    for lang_spec, spec in aliases.items():
        if spec == END:
            return lang_spec
    return ""


def add_end(fetched: FetchedTranslations, tables: SpecTables) -> FetchedTranslations:
    """Return ``fetched`` with the localized ``end`` added to the blocks catalog."""
    end = get_end_block(tables.aliases.get(fetched.language))
    if not end:
        return fetched
    return fetched._replace(blocks={**fetched.blocks, END: end})


def warn_missing_aliases(
    language: str,
    aliases: Mapping[str, str] | None,
    tables: SpecTables,
    console: Console,
) -> list[str]:
    """
    Print a warning for every alias ``language`` still needs.

    Returns:
        The missing English specs; every spec in ``need_alias`` when the
        language has no alias table at all
    """
    if aliases is None:
        print_warning(
            console, f"{language} is missing all aliases, add them to the alias table"
        )
        return list(tables.need_alias)

    english_specs = set(aliases.values())
    missing = [alias for alias in tables.need_alias if alias not in english_specs]
    for alias in missing:
        print_warning(
            console, f'{language} is missing "{alias}" translation in the alias table'
        )
    return missing
