"""Almacén de listas de precios sobre el backend HTTP del TMS.

Endpoints usados (solo lectura):
- GET lista-precios/{id}
- GET clientes/{id}
- GET clientes?codigo=...&size=20 (respuesta paginada: {"content": [...]})

Estos accesos están en adapters porque son I/O puro (HTTP).
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import BackendError, PriceListNotFound
from core.domain.models import Client, PriceList

_CLIENT_PAGE_SIZE = 20


class BackendStore:
    """Implementa `core.interfaces.price_list_store.PriceListStore`.

    Si no se inyecta `client`, el store crea uno propio y lo cierra en
    `aclose()` (o al salir del `async with`).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)

    async def __aenter__(self) -> "BackendStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug(f"GET {path} {params or ''}".rstrip())
        resp = await self._client.get(path, params=params)
        if resp.status_code == 404:
            raise PriceListNotFound(path)
        if resp.status_code != 200:
            raise BackendError(f"GET {path}: HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as exc:
            raise BackendError(f"GET {path}: respuesta no es JSON") from exc

    async def get_price_list(self, price_list_id: int) -> PriceList:
        data = await self._get_json(f"lista-precios/{price_list_id}")
        if not isinstance(data, dict):
            raise BackendError(f"lista-precios/{price_list_id}: cuerpo inesperado")
        return PriceList.model_validate(data)

    async def get_client(self, client_id: int) -> Client:
        data = await self._get_json(f"clientes/{client_id}")
        if not isinstance(data, dict):
            raise BackendError(f"clientes/{client_id}: cuerpo inesperado")
        return Client.model_validate(data)

    async def find_client_by_code(self, code: str) -> Client | None:
        data = await self._get_json("clientes", params={"codigo": code, "size": _CLIENT_PAGE_SIZE})
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list):
            raise BackendError("clientes: respuesta paginada sin 'content'")
        for item in content:
            if not isinstance(item, dict):
                continue
            try:
                client = Client.model_validate(item)
            except ValidationError:
                continue
            # El backend filtra con LIKE; exigimos igualdad exacta.
            if client.codigo == code:
                return client
        return None
