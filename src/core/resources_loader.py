"""Cargador de recursos/datasets.

Este módulo vive en `core/` porque:
- centraliza el *qué* datos necesitamos (tabla de cordones) sin acoplarse a la CLI
- evita duplicar lógica de paths en servicios y comandos.

La tabla de cordones viaja con el paquete (`core/resources/cordones.json`);
se puede reemplazar con `ZONAS_CORDONES_PATH` sin tocar el clasificador.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from loguru import logger

from core.config import AppSettings
from core.domain.models import CordonTable

CORDONES_FILENAME = "cordones.json"


def _resources_dir() -> Path:
    # core/resources_loader.py -> core/resources
    return Path(__file__).resolve().parent / "resources"


def get_default_cordones_path() -> Path:
    return _resources_dir() / CORDONES_FILENAME


def load_cordon_table(path: Path) -> CordonTable:
    """Lee y valida un JSON de cordones (lanza si el archivo es inválido)."""

    raw = path.read_text(encoding="utf-8")
    table = CordonTable.model_validate(json.loads(raw))
    logger.debug(f"Cordones cargados desde {path} ({len(table.cordones)} tramos)")
    return table


@lru_cache(maxsize=None)
def _cached_cordon_table(path: Path) -> CordonTable:
    return load_cordon_table(path)


@lru_cache(maxsize=1)
def get_configured_cordones_path() -> Path:
    """`ZONAS_CORDONES_PATH` si está configurado; si no, el asset empaquetado.

    Se lee una vez por proceso (`cache_clear()` para releer la configuración).
    """

    return AppSettings().cordones_path or get_default_cordones_path()


def get_cordon_table(path: Path | None = None) -> CordonTable:
    """Tabla de cordones del proceso (cacheada por ruta)."""

    return _cached_cordon_table((path or get_configured_cordones_path()).resolve())
