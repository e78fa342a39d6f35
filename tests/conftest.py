"""
Global test fixtures for scratchblocks-locales tests.

Provides small spec tables, a recording console and sample .po catalogs so
the pipeline stages can be tested without the full English tables or the
network.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from types import MappingProxyType

import pytest
from rich.console import Console

from scratchblocks_locales.config.schema import LocalesConfig
from scratchblocks_locales.fetching import FetchedTranslations
from scratchblocks_locales.tables.specs import SpecTables


@pytest.fixture
def console() -> Console:
    """Console that records its output instead of writing to a terminal."""
    return Console(record=True, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def small_tables() -> SpecTables:
    """
    Compact tables covering every spec category.

    Returns:
        SpecTables with a German alias table only
    """
    return SpecTables(
        commands=("move %n steps", "say %s", "%n + %n", "else", "when distance < %n"),
        dropdowns=("all", "edge"),
        palette=("Motion", "Looks"),
        math=("abs", "sqrt"),
        osis=("other scripts in sprite", "other scripts in stage"),
        need_alias=(
            "turn @turnRight %n degrees",
            "turn @turnLeft %n degrees",
            "when @greenFlag clicked",
        ),
        untranslated=frozenset({"%n + %n"}),
        acceptable_missing=frozenset({"else", "end"}),
        aliases=MappingProxyType(
            {
                "de": MappingProxyType(
                    {
                        "drehe dich nach rechts um %n Grad": "turn @turnRight %n degrees",
                        "drehe dich nach links um %n Grad": "turn @turnLeft %n degrees",
                        "Wenn die grüne Flagge angeklickt": "when @greenFlag clicked",
                        "Ende": "end",
                    }
                )
            }
        ),
    )


@pytest.fixture
def editor_po() -> str:
    """German editor catalog."""
    return dedent("""\
        # German translation of the editor
        msgid ""
        msgstr ""
        "Content-Type: text/plain; charset=UTF-8\\n"

        msgid "Looks"
        msgstr "Aussehen"

        msgid "edge"
        msgstr "Rand"

        msgid "abs"
        msgstr "Betrag"

        msgid "sqrt"
        msgstr "Wurzel"

        msgid "other scripts in sprite"
        msgstr "andere Skripte der Figur"
    """)


@pytest.fixture
def blocks_po() -> str:
    """German blocks catalog."""
    return dedent("""\
        msgid "move %n steps"
        msgstr "gehe %n er Schritt"

        msgid "say %s"
        msgstr "sage %s"

        msgid "when distance < %n"
        msgstr "wenn Entfernung < %n"

        msgid "define"
        msgstr "Definiere"

        msgid "Motion"
        msgstr "Bewegung"

        msgid "all"
        msgstr "alle"

        msgid "edge"
        msgstr "Rand (Block)"
    """)


@pytest.fixture
def fetched_de() -> FetchedTranslations:
    """Already parsed German catalogs."""
    return FetchedTranslations(
        language="de",
        editor={
            "Looks": "Aussehen",
            "edge": "Rand",
            "abs": "Betrag",
            "sqrt": "Wurzel",
            "other scripts in sprite": "andere Skripte der Figur",
        },
        blocks={
            "move %n steps": "gehe %n er Schritt",
            "say %s": "sage %s",
            "when distance < %n": "wenn Entfernung < %n",
            "define": "Definiere",
            "Motion": "Bewegung",
            "all": "alle",
            "edge": "Rand (Block)",
        },
    )


@pytest.fixture
def locales_config(tmp_path: Path) -> LocalesConfig:
    """Configuration writing into a temporary locales directory."""
    return LocalesConfig(
        base_url="http://translate.example.org/download",
        locales_dir=tmp_path / "locales",
        timeout=5.0,
        max_attempts=2,
    )
