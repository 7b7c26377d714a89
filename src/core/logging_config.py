"""Logging con Rich.

Por qué aquí:
- Un único punto de configuración para Core y CLI.
- Los logs van a stderr (RichHandler) y no ensucian el reporte en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "readtimestamp"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configura el logger raíz de la aplicación (idempotente)."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger hijo para un módulo (`readtimestamp.<name>`)."""

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
