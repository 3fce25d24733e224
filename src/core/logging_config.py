"""Logging setup shared by the CLI and the web server.

Modules log through `logging.getLogger(__name__)`; this only decides where
records go. Rich renders them on the console the same way the CLI renders
everything else.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_HANDLER_NAME = "primos-rich"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single `RichHandler` on the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
        root.addHandler(handler)

    return root
