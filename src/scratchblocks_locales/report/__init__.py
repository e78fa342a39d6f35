"""Coverage statistics."""

from .coverage import CoverageReport, compute_coverage, print_coverage, required_total

__all__ = ["CoverageReport", "compute_coverage", "print_coverage", "required_total"]
