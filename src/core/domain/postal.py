"""Normalización de códigos postales.

Se comparte entre el matcher de zonas y el clasificador de cordones: ambos
limpian la entrada igual (solo dígitos) antes de comparar.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from core.domain.errors import InvalidPostalCode

_NON_DIGITS = re.compile(r"\D")


class PostalCode(NamedTuple):
    digits: str  # conserva ceros a la izquierda
    number: int

    @property
    def canonical(self) -> str:
        return str(self.number)


def normalize_postal_code(raw: str | int | None) -> PostalCode:
    """Limpia `raw` y lo convierte a `PostalCode`.

    Lanza `InvalidPostalCode` si no quedan dígitos o si el número resultante es 0.
    """

    if raw is None:
        raise InvalidPostalCode(raw)

    digits = _NON_DIGITS.sub("", str(raw))
    if not digits:
        raise InvalidPostalCode(raw)

    try:
        number = int(digits)
    except ValueError as exc:
        # Más dígitos de los que CPython convierte a int: no es un CP.
        raise InvalidPostalCode(raw) from exc
    if number == 0:
        raise InvalidPostalCode(raw)
    return PostalCode(digits=digits, number=number)
