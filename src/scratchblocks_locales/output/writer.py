"""
Writing scratchblocks locale files.

Each language ends up in ``<locales_dir>/<language>.json`` nested under its
language code, the shape scratchblocks' ``loadLanguages`` expects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..transform.extractor import LocaleTranslation

logger = logging.getLogger(__name__)


def clean_locales(locales_dir: Path) -> list[Path]:
    """
    Remove every ``.json`` file in ``locales_dir``.

    The directory is created when it does not exist yet.

    Returns:
        The removed files
    """
    locales_dir.mkdir(parents=True, exist_ok=True)
    removed: list[Path] = []
    for json_file in sorted(locales_dir.glob("*.json")):
        if json_file.is_file():
            json_file.unlink()
            removed.append(json_file)
    logger.debug(f"Removed {len(removed)} locale files from {locales_dir}")
    return removed


def locale_path(locales_dir: Path, language: str) -> Path:
    """Return the file the locale of ``language`` is written to."""
    return locales_dir / f"{language}.json"


def write_json(translation: LocaleTranslation, locales_dir: Path) -> Path:
    """
    Write ``translation`` as pretty-printed JSON.

    Returns:
        Path of the written file
    """
    filename = locale_path(locales_dir, translation.language)
    out = {translation.language: translation.to_dict()}

    with filename.open("w", encoding="utf-8") as f:
        json.dump(out, f, indent=2, ensure_ascii=False)

    logger.info(f"Wrote {filename}")
    return filename
