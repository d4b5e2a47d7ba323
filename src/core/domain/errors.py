"""Errores del dominio de zonas.

Dos familias:
- Errores de entrada del usuario (`InvalidPostalCode`) y de cobertura
  (`ZoneNotFound`): se propagan para que la UI muestre un mensaje.
- Errores de disponibilidad de datos (`PriceListNotFound`, `BackendError`):
  los lanza el adaptador del backend y el resolver los absorbe.
"""

from __future__ import annotations


class ZonasError(Exception):
    """Base de los errores que la UI puede mostrar al usuario."""

    kind = "Error"
    message = "Error al calcular la zona de entrega"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)

    def as_dict(self) -> dict[str, str]:
        return {"error": self.kind, "message": self.user_message}


class InvalidPostalCode(ZonasError):
    kind = "InvalidPostalCode"
    message = "Por favor, ingrese un código postal válido"

    def __init__(self, raw: object = None) -> None:
        super().__init__()
        self.raw = raw


class ZoneNotFound(ZonasError):
    kind = "NotFound"
    message = "No se encontró una zona para el código postal ingresado"


class NoZonesAvailable(ZoneNotFound):
    message = "No hay zonas disponibles para calcular el precio"


class PriceListNotFound(LookupError):
    """El backend respondió 404 para la lista o el cliente pedido."""


class BackendError(RuntimeError):
    """Respuesta inesperada del backend (status no 2xx o cuerpo inválido)."""
