"""
English specs that every locale file must resolve.

The lists are bundled into an immutable :class:`SpecTables` value which the
pipeline stages receive explicitly, so tests can swap in small tables.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Final, NamedTuple

from .aliases import EXTRA_ALIASES, GREEN_FLAG, TURN_LEFT, TURN_RIGHT
from .commands import ENGLISH_COMMANDS

PALETTE_SPECS: Final[tuple[str, ...]] = (
    "Motion", "Looks", "Sound", "Pen", "Data", "variable",
    "list", "Events", "Control", "Sensing", "Operators",
    "More Blocks", "Tips",
)

# Specs every alias table has to provide
NEED_ALIAS: Final[tuple[str, ...]] = (TURN_RIGHT, TURN_LEFT, GREEN_FLAG)

# Symbols that are never translated
UNTRANSLATED: Final[tuple[str, ...]] = (
    "%n + %n",
    "%n - %n",
    "%n * %n",
    "%n / %n",
    "%s < %s",
    "%s = %s",
    "%s > %s",
    "…",
    "...",
)

# Obsolete, extension or structural specs the catalogs may lack
ACCEPTABLE_MISSING: Final[tuple[str, ...]] = (
    "turn %m.motor on for %n seconds",
    "set light color to %n",
    "play note %n for %n seconds",
    "when tilted",
    "tilt %m.xxx",
    "else",
    "end",
    ". . .",
    "%n @addInput",
    "user id",
    "if %b",
    "forever if %b",
    "stop script",
    "stop all",
    "switch to costume %m.costume",
    "next background",
    "switch to background %m.backdrop",
    "background #",
    "loud?",
)

MATH_FUNCS: Final[tuple[str, ...]] = (
    "abs", "floor", "ceiling", "sqrt", "sin", "cos", "tan",
    "asin", "acos", "atan", "ln", "log", "e ^", "10 ^",
)

OSIS: Final[tuple[str, ...]] = ("other scripts in sprite", "other scripts in stage")

DROPDOWN_SPECS: Final[tuple[str, ...]] = (
    "A connected", "all", "all around",
    "B connected", "brightness", "button pressed", "C connected", "color",
    "costume name", "D connected", "date", "day of week", "don't rotate",
    "down arrow", "edge", "fisheye", "ghost", "hour",
    "left arrow", "left-right", "light", "minute", "month",
    "mosaic", "motion", "mouse-pointer",
    "myself", "off", "on", "on-flipped", "other scripts in sprite",
    "pixelate", "previous backdrop", "resistance-A",
    "resistance-B", "resistance-C", "resistance-D", "reverse", "right arrow",
    "second", "slider", "sound", "space", "Stage", "that way", "this script",
    "this sprite", "this way", "up arrow", "video motion", "whirl", "year",
)


def unique(items: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(items))


COMMAND_SPECS: Final[tuple[str, ...]] = unique(cmd.spec for cmd in ENGLISH_COMMANDS)


class SpecTables(NamedTuple):
    """Read-only tables shared by every language pipeline."""

    commands: tuple[str, ...]
    dropdowns: tuple[str, ...]
    palette: tuple[str, ...]
    math: tuple[str, ...]
    osis: tuple[str, ...]
    need_alias: tuple[str, ...]
    untranslated: frozenset[str]
    acceptable_missing: frozenset[str]
    aliases: Mapping[str, Mapping[str, str]]

    def is_excluded(self, spec: str) -> bool:
        """Return True if a missing translation for ``spec`` is expected."""
        return spec in self.untranslated or spec in self.acceptable_missing

    def remove_not_needed(self, specs: Iterable[str]) -> list[str]:
        """Return the specs that are neither untranslated nor acceptably missing."""
        return [spec for spec in specs if not self.is_excluded(spec)]


def default_tables() -> SpecTables:
    """Build the tables used for the real locale files."""
    return SpecTables(
        commands=COMMAND_SPECS,
        dropdowns=DROPDOWN_SPECS,
        palette=PALETTE_SPECS,
        math=MATH_FUNCS,
        osis=OSIS,
        need_alias=NEED_ALIAS,
        untranslated=frozenset(UNTRANSLATED),
        acceptable_missing=frozenset(ACCEPTABLE_MISSING),
        aliases=EXTRA_ALIASES,
    )
