"""Translation coverage of a locale file."""

from __future__ import annotations

from typing import NamedTuple

from rich.console import Console

from ..tables.specs import SpecTables
from ..transform.extractor import LocaleTranslation
from ..utils.console import print_success, print_warning


class CoverageReport(NamedTuple):
    """How many of the required specs a language translates."""

    language: str
    translated: int
    total: int

    @property
    def percentage(self) -> int:
        """Translated share in percent, rounded half up."""
        if self.total == 0:
            return 100
        return (self.translated * 200 + self.total) // (self.total * 2)

    @property
    def complete(self) -> bool:
        return self.translated == self.total

    def __str__(self) -> str:
        return (
            f"{self.language}: translated {self.translated} of {self.total}, "
            f"{self.percentage} %"
        )


def required_total(tables: SpecTables) -> int:
    """Count the command, dropdown and palette specs that must be translated."""
    total = len(tables.remove_not_needed(tables.commands))
    total += len(tables.dropdowns)
    total += len(tables.palette)
    return total


def compute_coverage(translation: LocaleTranslation, tables: SpecTables) -> CoverageReport:
    """Compare the resolved specs of ``translation`` with the required total."""
    translated = len(tables.remove_not_needed(translation.commands))
    translated += len(translation.dropdowns)
    translated += len(translation.palette)
    return CoverageReport(
        language=translation.language,
        translated=translated,
        total=required_total(tables),
    )


def print_coverage(report: CoverageReport, console: Console) -> None:
    """Print ``report``, green when every spec is translated and red otherwise."""
    if report.complete:
        print_success(console, str(report))
    else:
        print_warning(console, str(report))
