"""
Line scanner for .po translation catalogs.

Only single-line ``msgid``/``msgstr`` pairs are understood. Continuation
lines, comments, plural forms and escaped quotes are not handled; the
catalogs this tool reads keep every block spec on one line.

Example:
    >>> parse_po('msgid "move %n steps"\\nmsgstr "gehe %n Schritt"\\n')
    {'move %n steps': 'gehe %n Schritt'}
"""

from __future__ import annotations

import re

MSGID_PREFIX = "msgid "
MSGSTR_PREFIX = "msgstr "

_QUOTED = re.compile(r'^"(.*)"$')


def po_line_content(line: str, strip: int) -> str:
    """
    Get the value of a .po line.

    Args:
        line: The raw .po line
        strip: How many leading characters (the keyword) to cut

    Returns:
        The value with surrounding whitespace and one pair of quotes removed

    Example:
        >>> po_line_content('msgid    "the content"  ', 5)
        'the content'
    """
    value = line[strip:].strip()
    return _QUOTED.sub(r"\1", value)


def parse_po(content: str) -> dict[str, str]:
    """
    Parse .po content into a ``msgid -> msgstr`` mapping.

    Pairs with an empty id or an empty translation are skipped. A ``msgstr``
    without a preceding ``msgid`` is ignored. Duplicate ids keep the last
    translation.

    Args:
        content: Text of a .po file

    Returns:
        Mapping of original phrase to translated phrase
    """
    msg_id: str | None = None
    translations: dict[str, str] = {}

    for line in content.split("\n"):
        if line.startswith(MSGID_PREFIX):
            msg_id = po_line_content(line, len(MSGID_PREFIX))
        elif line.startswith(MSGSTR_PREFIX):
            msg_str = po_line_content(line, len(MSGSTR_PREFIX))
            if msg_id and msg_str:
                translations[msg_id] = msg_str
                msg_id = None

    return translations
