"""Contrato del almacén de listas de precios (backend).

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el resolver funcione contra el backend HTTP o contra un
  almacén en memoria en tests, sin acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Client, PriceList


@runtime_checkable
class PriceListStore(Protocol):
    """Lecturas que el Core necesita del backend.

    Reglas de diseño:
    - Los métodos son asíncronos porque típicamente harán I/O (HTTP).
    - Un id inexistente lanza `PriceListNotFound`; otras fallas lanzan
      `BackendError` o el error de transporte correspondiente.
    """

    async def get_price_list(self, price_list_id: int) -> PriceList:
        ...

    async def get_client(self, client_id: int) -> Client:
        ...

    async def find_client_by_code(self, code: str) -> Client | None:
        """Busca un cliente por su código de negocio; None si no existe."""

        ...
