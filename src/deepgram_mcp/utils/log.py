"""Diagnostic logging to stderr.

Stdout is the protocol channel, so every log record goes through a rich
handler bound to a stderr console.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, *, console: Console | None = None) -> None:
    """Install a :class:`RichHandler` on the ``deepgram_mcp`` logger."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger("deepgram_mcp")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
