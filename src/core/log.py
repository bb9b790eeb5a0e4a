"""Definición del logger central.

Un único logger `tmpl_funcs`; la salida va a stderr con Rich para no mezclarse
con la plantilla renderizada en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

THIS_NAME = "tmpl_funcs"

logger = logging.getLogger(THIS_NAME)
logger.addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger hijo de `tmpl_funcs` (p.ej. `tmpl_funcs.renderer`)."""

    return logger.getChild(name) if name else logger


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Instala un `RichHandler` en stderr (idempotente)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
