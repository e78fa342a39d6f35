"""Minimal reader for the .po catalogs served by the translation server."""

from .parser import parse_po, po_line_content

__all__ = ["parse_po", "po_line_content"]
