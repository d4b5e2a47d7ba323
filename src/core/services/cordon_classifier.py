"""Clasificador estático de cordones del AMBA.

Independiente de las listas de precios: no comparte ids ni camino de
búsqueda con el matcher de zonas. Se usa para agrupar envíos en reportes.
"""

from __future__ import annotations

from core.domain.errors import InvalidPostalCode
from core.domain.models import CordonTable
from core.domain.postal import normalize_postal_code
from core.resources_loader import get_cordon_table


def classify(postal_code: str | int | None, table: CordonTable | None = None) -> str:
    """Devuelve "CABA", "Zona 1", "Zona 2", "Zona 3" o "Sin Zona". Nunca lanza."""

    table = table or get_cordon_table()
    try:
        normalized = normalize_postal_code(postal_code)
    except InvalidPostalCode:
        return table.sin_zona

    for cordon in table.cordones:
        if cordon.contains(normalized):
            return cordon.nombre
    return table.sin_zona
