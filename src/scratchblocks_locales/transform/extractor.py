"""
Spec extraction for scratchblocks locale files.

Turns the parsed catalogs of one language into the record scratchblocks
loads: the palette, dropdown and command translations keyed by English spec,
plus the handful of fields scratchblocks needs to parse localized scripts.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field

from rich.console import Console

from ..fetching import FetchedTranslations
from ..tables.specs import SpecTables
from ..utils.console import print_warning
from .aliases import warn_missing_aliases

DEFINE_SPEC = "define"
WHEN_DISTANCE_SPEC = "when distance < %n"
WHEN_DISTANCE_SUFFIX = " < %n"


@dataclass
class LocaleTranslation:
    """Everything scratchblocks needs for one language."""

    language: str
    aliases: dict[str, str] | None = None
    define: list[str] = field(default_factory=list)
    ignorelt: list[str | None] = field(default_factory=list)
    commands: dict[str, str] = field(default_factory=dict)
    dropdowns: dict[str, str] = field(default_factory=dict)
    palette: dict[str, str] = field(default_factory=dict)
    math: list[str] = field(default_factory=list)
    osis: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return the serializable fields, without the language code."""
        data = asdict(self)
        del data["language"]
        return data


def translate(
    language: str,
    specs: Sequence[str],
    primary: Mapping[str, str],
    secondary: Mapping[str, str] | None,
    tables: SpecTables,
    console: Console,
) -> dict[str, str]:
    """
    Translate ``specs`` using ``primary`` first and ``secondary`` second.

    A warning is printed for every spec found in neither mapping unless it
    is listed as untranslated or acceptably missing.

    Example:
        translate("no", ["a", "b", "c"], {"a": "preferred"},
                  {"a": "not preferred", "b": "translation"}, tables, console)
        => {"a": "preferred", "b": "translation"}, plus a warning for "c"

    Returns:
        Mapping of English spec to translated spec, in ``specs`` order
    """
    secondary = secondary or {}
    translations: dict[str, str] = {}

    for spec in specs:
        lang_spec = primary.get(spec) or secondary.get(spec)
        if lang_spec:
            translations[spec] = lang_spec
        elif not tables.is_excluded(spec):
            print_warning(console, f'{language}: missing translation for "{spec}"')

    return translations


def get_when_distance(blocks: Mapping[str, str]) -> str | None:
    """
    Get the translated ``when distance < %n`` without the comparison.

    scratchblocks needs it to ignore the ``<`` of that hat block when
    parsing.

    Returns:
        The leading phrase, or None if the block is not translated
    """
    when_distance = blocks.get(WHEN_DISTANCE_SPEC)
    if not when_distance:
        return None
    return when_distance.split(WHEN_DISTANCE_SUFFIX)[0]


def transform_translation(
    fetched: FetchedTranslations, tables: SpecTables, console: Console
) -> LocaleTranslation:
    """
    Transform fetched catalogs into a :class:`LocaleTranslation`.

    Commands resolve against the blocks catalog only; dropdowns and palette
    labels prefer blocks and fall back to editor; math functions and the
    "other scripts in" phrases come from the editor catalog.
    """
    language = fetched.language
    editor = fetched.editor
    blocks = fetched.blocks

    alias_table = tables.aliases.get(language)
    aliases = dict(alias_table) if alias_table is not None else None
    _ = warn_missing_aliases(language, aliases, tables, console)

    return LocaleTranslation(
        language=language,
        aliases=aliases,
        define=[blocks.get(DEFINE_SPEC) or ""],
        ignorelt=[get_when_distance(blocks)],
        commands=translate(language, tables.commands, blocks, None, tables, console),
        dropdowns=translate(language, tables.dropdowns, blocks, editor, tables, console),
        palette=translate(language, tables.palette, blocks, editor, tables, console),
        math=list(translate(language, tables.math, editor, None, tables, console).values()),
        osis=list(translate(language, tables.osis, editor, None, tables, console).values()),
    )
