"""Command-line interface helpers."""

from .args import ParsedArgs, UsageError, create_argument_parser, parse_arguments, resolve_languages

__all__ = [
    "ParsedArgs",
    "UsageError",
    "create_argument_parser",
    "parse_arguments",
    "resolve_languages",
]
