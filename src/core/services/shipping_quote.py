"""Cotización de envíos: cliente -> lista de precios -> zona -> precio.

Orquesta el resolver y el matcher para los dos consumidores del sistema:
- el formulario de cotización (errores tipados para mostrar al usuario);
- la ingesta de pedidos de marketplaces (`shipping_cost`, que nunca falla
  y devuelve 0.0 cuando no hay precio).
"""

from __future__ import annotations

import httpx
from loguru import logger

from core.domain.errors import BackendError, NoZonesAvailable, PriceListNotFound, ZonasError
from core.domain.models import Client, ZoneQuote
from core.interfaces.price_list_store import PriceListStore
from core.services.price_list_resolver import PriceListResolver
from core.services.zone_matcher import ZoneTable, compile_zone_table


class ShippingQuoteService:
    def __init__(self, store: PriceListStore, resolver: PriceListResolver | None = None) -> None:
        self._store = store
        self._resolver = resolver or PriceListResolver(store)

    async def find_client(self, client_code: str) -> Client | None:
        try:
            return await self._store.find_client_by_code(client_code)
        except (PriceListNotFound, BackendError, httpx.HTTPError) as exc:
            logger.warning(f"No se pudo cargar el cliente {client_code!r}: {exc!r}")
            return None

    async def zone_table(self, price_list_id: int | str | None) -> ZoneTable:
        zones = await self._resolver.resolve_zone_table(price_list_id)
        return compile_zone_table(zones)

    async def quote_for_price_list(self, price_list_id: int | str | None, postal_code: str) -> ZoneQuote:
        table = await self.zone_table(price_list_id)
        return table.match(postal_code)

    async def quote_for_client(self, client_code: str, postal_code: str) -> ZoneQuote:
        """Cotiza para el cliente con código `client_code`.

        Un cliente inexistente o sin lista de precios se reporta como
        `NoZonesAvailable`, igual que una lista sin zonas.
        """

        client = await self.find_client(client_code)
        if client is None or client.lista_precios_id is None:
            logger.info(f"Cliente {client_code!r} sin lista de precios asignada")
            table = compile_zone_table([])
        else:
            table = await self.zone_table(client.lista_precios_id)
        return table.match(postal_code)

    async def shipping_cost(self, postal_code: str | None, price_list_id: int | None) -> float:
        """Costo numérico del envío; 0.0 ante cualquier falla."""

        if price_list_id is None:
            return 0.0
        try:
            quote = await self.quote_for_price_list(price_list_id, postal_code or "")
        except NoZonesAvailable:
            logger.warning(f"Lista de precios sin zonas para ID: {price_list_id}")
            return 0.0
        except ZonasError as exc:
            logger.warning(f"Sin costo para CP {postal_code!r} (lista {price_list_id}): {exc}")
            return 0.0

        if quote.amount is None:
            logger.warning(f"Zona {quote.zone_name} sin valor configurado")
            return 0.0
        logger.info(f"Costo de envío encontrado en zona {quote.zone_name}: ${quote.amount:.2f}")
        return quote.amount
