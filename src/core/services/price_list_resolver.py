"""Resolución de la tabla de zonas efectiva de una lista de precios.

Una lista puede tener zonas propias o delegar en otra lista. Solo se sigue
un salto: si la lista referenciada también delega, no hay zonas.

Política de errores: toda falla de disponibilidad (404, red, referencia
mal formada) se registra y se degrada a tabla vacía; el llamador muestra
"sin lista de precios" en vez de un error.
"""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError

from core.domain.errors import BackendError, PriceListNotFound
from core.domain.models import Client, Delegates, NoZoneSource, OwnZones, PriceList, Zone
from core.interfaces.price_list_store import PriceListStore

_SOFT_ERRORS = (PriceListNotFound, BackendError, ValidationError, httpx.HTTPError)


def parse_reference_id(reference: str | int | None) -> int | None:
    """Id numérico de una lista referenciada, o None si no es un entero positivo."""

    if reference is None:
        return None
    try:
        value = int(str(reference).strip())
    except ValueError:
        return None
    return value if value > 0 else None


class PriceListResolver:
    def __init__(self, store: PriceListStore) -> None:
        self._store = store

    async def _fetch(self, price_list_id: int) -> PriceList | None:
        try:
            return await self._store.get_price_list(price_list_id)
        except _SOFT_ERRORS as exc:
            logger.warning(f"No se pudo cargar la lista de precios {price_list_id}: {exc!r}")
            return None

    async def resolve_zone_table(self, price_list_id: int | str | None) -> list[Zone]:
        """Zonas efectivas de la lista `price_list_id` (nunca lanza)."""

        if price_list_id is None or price_list_id == "":
            return []
        list_id = parse_reference_id(price_list_id)
        if list_id is None:
            logger.warning(f"Id de lista de precios inválido: {price_list_id!r}")
            return []

        price_list = await self._fetch(list_id)
        if price_list is None:
            return []

        source = price_list.source
        if isinstance(source, OwnZones):
            if not source.zones:
                logger.info(f"Lista de precios {list_id} sin zonas propias cargadas")
            return list(source.zones)
        if isinstance(source, NoZoneSource):
            logger.info(f"Lista de precios {list_id} no tiene zonas ni lista referenciada")
            return []

        assert isinstance(source, Delegates)
        referenced_id = parse_reference_id(source.referenced_id)
        if referenced_id is None:
            logger.warning(
                f"Lista de precios {list_id} referencia un id inválido: {source.referenced_id!r}"
            )
            return []

        # Secuencial: el segundo fetch depende del primero.
        referenced = await self._fetch(referenced_id)
        if referenced is None:
            return []

        ref_source = referenced.source
        if isinstance(ref_source, OwnZones) and ref_source.zones:
            logger.debug(
                f"Lista {list_id} usa {len(ref_source.zones)} zonas de la lista {referenced_id}"
            )
            return list(ref_source.zones)

        logger.info(
            f"Lista referenciada {referenced_id} (desde {list_id}) no tiene zonas propias; "
            "no se siguen más saltos"
        )
        return []

    async def resolve_for_client(self, client: Client | None) -> list[Zone]:
        if client is None or client.lista_precios_id is None:
            return []
        return await self.resolve_zone_table(client.lista_precios_id)
