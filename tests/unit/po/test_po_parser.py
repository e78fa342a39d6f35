"""Tests for the .po line scanner."""

from __future__ import annotations

from textwrap import dedent

import pytest

from scratchblocks_locales.po import parse_po, po_line_content


class TestPoLineContent:
    """Test extraction of quoted values."""

    def test_strips_keyword_whitespace_and_quotes(self) -> None:
        """Test the documented example."""
        assert po_line_content('msgid    "the content"  ', 5) == "the content"

    def test_unquoted_value_is_kept(self) -> None:
        """Test that a value without quotes is only trimmed."""
        assert po_line_content("msgstr  plain ", 7) == "plain"

    def test_only_one_pair_of_quotes_removed(self) -> None:
        """Test that inner quotes survive."""
        assert po_line_content('msgid ""quoted""', 6) == '"quoted"'

    @pytest.mark.parametrize("line", ['msgstr ""', "msgstr ", 'msgstr   ""  '])
    def test_empty_values(self, line: str) -> None:
        """Test lines without content."""
        assert po_line_content(line, 7) == ""


class TestParsePo:
    """Test the parse_po function."""

    def test_single_pair(self) -> None:
        """Test that one msgid/msgstr pair yields exactly one entry."""
        content = 'msgid "move %n steps"\nmsgstr "gehe %n er Schritt"\n'

        assert parse_po(content) == {"move %n steps": "gehe %n er Schritt"}

    def test_empty_msgstr_is_skipped(self) -> None:
        """Test that an untranslated entry produces nothing."""
        content = 'msgid "move %n steps"\nmsgstr ""\n'

        assert parse_po(content) == {}

    def test_msgstr_without_msgid_is_ignored(self) -> None:
        """Test that a msgstr with no pending msgid contributes nothing."""
        content = 'msgstr "orphan"\nmsgid "say %s"\nmsgstr "sage %s"\n'

        assert parse_po(content) == {"say %s": "sage %s"}

    def test_header_entry_is_skipped(self) -> None:
        """Test that the empty-id header does not become an entry."""
        content = dedent("""\
            msgid ""
            msgstr ""
            "Content-Type: text/plain; charset=UTF-8\\n"

            msgid "Motion"
            msgstr "Bewegung"
        """)

        assert parse_po(content) == {"Motion": "Bewegung"}

    def test_pending_id_cleared_after_commit(self) -> None:
        """Test that a second msgstr does not reuse the committed id."""
        content = 'msgid "a"\nmsgstr "x"\nmsgstr "y"\n'

        assert parse_po(content) == {"a": "x"}

    def test_untranslated_id_is_replaced_by_next_id(self) -> None:
        """Test that an id with empty msgstr stays pending until the next msgid."""
        content = 'msgid "a"\nmsgstr ""\nmsgid "b"\nmsgstr "B"\n'

        assert parse_po(content) == {"b": "B"}

    def test_duplicate_ids_last_write_wins(self) -> None:
        """Test duplicate keys within one file."""
        content = 'msgid "a"\nmsgstr "first"\nmsgid "a"\nmsgstr "second"\n'

        assert parse_po(content) == {"a": "second"}

    def test_comments_and_unknown_lines_ignored(self) -> None:
        """Test that only the two markers are recognized."""
        content = dedent("""\
            #: blocks.js:12
            #, fuzzy
            msgctxt "motion"
            msgid "turn"
            msgstr "drehe"
        """)

        assert parse_po(content) == {"turn": "drehe"}

    def test_crlf_line_endings(self) -> None:
        """Test that carriage returns are trimmed with the whitespace."""
        content = 'msgid "Pen"\r\nmsgstr "Malstift"\r\n'

        assert parse_po(content) == {"Pen": "Malstift"}

    def test_keyword_must_start_line(self) -> None:
        """Test that indented markers are not recognized."""
        content = '  msgid "a"\n  msgstr "b"\n'

        assert parse_po(content) == {}

    def test_fixture_catalog(self, blocks_po: str) -> None:
        """Test a realistic catalog."""
        result = parse_po(blocks_po)

        assert result["when distance < %n"] == "wenn Entfernung < %n"
        assert len(result) == 7
