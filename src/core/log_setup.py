"""Configuración de logs (loguru).

La librería nunca toca los sinks al importarse; solo la CLI (u otro
entrypoint) llama a `configure_logging`.
"""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), colorize=True, format=_FORMAT)
