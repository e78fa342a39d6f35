"""
scratchblocks-locales - builds scratchblocks locale files from the Scratch
translation server.
"""

import sys

from .main import main as cli_main


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(cli_main())
    except KeyboardInterrupt:
        print("Cancelled by user", file=sys.stderr)
        sys.exit(1)


__all__ = ["run"]
