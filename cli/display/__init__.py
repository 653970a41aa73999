"""
CLI display modules.
"""

import logging

from rich.logging import RichHandler

from cli.display.tables import display_smus_info, display_track_symbols
from cli.display.hex_view import display_header_dump

__all__ = [
    "configure_logging",
    "display_smus_info",
    "display_track_symbols",
    "display_header_dump",
]


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich (INFO when verbose, else WARNING)."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, markup=False)],
        force=True,
    )
