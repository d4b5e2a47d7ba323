"""Fixtures compartidas: zonas de ejemplo y un backend en memoria."""

from __future__ import annotations

import sys

import pytest
from loguru import logger

from core.domain.errors import BackendError, PriceListNotFound
from core.domain.models import Client, PriceList, Zone


class InMemoryStore:
    """`PriceListStore` en memoria que registra cada lectura."""

    def __init__(
        self,
        price_lists: dict[int, dict] | None = None,
        clients: list[dict] | None = None,
        failing_ids: set[int] | None = None,
    ) -> None:
        self.price_lists = price_lists or {}
        self.clients = clients or []
        self.failing_ids = failing_ids or set()
        self.calls: list[int] = []

    async def get_price_list(self, price_list_id: int) -> PriceList:
        self.calls.append(price_list_id)
        if price_list_id in self.failing_ids:
            raise BackendError(f"lista-precios/{price_list_id}: HTTP 500")
        if price_list_id not in self.price_lists:
            raise PriceListNotFound(f"lista-precios/{price_list_id}")
        return PriceList.model_validate(self.price_lists[price_list_id])

    async def get_client(self, client_id: int) -> Client:
        for data in self.clients:
            if data.get("id") == client_id:
                return Client.model_validate(data)
        raise PriceListNotFound(f"clientes/{client_id}")

    async def find_client_by_code(self, code: str) -> Client | None:
        for data in self.clients:
            if data.get("codigo") == code:
                return Client.model_validate(data)
        return None


@pytest.fixture(autouse=True)
def _reset_logging():
    """La CLI reemplaza los sinks de loguru; se restaura el default tras cada test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def amba_zones() -> list[dict]:
    """Tabla tipo 'Lista General': CABA por rango y dos cordones enumerados."""
    return [
        {"id": "z1", "codigo": "CABA", "nombre": "CABA", "cps": "1000-1599", "valor": "500"},
        {"id": "z2", "codigo": "Z1", "nombre": "Zona 1", "cps": "1602, 1603, 1605", "valor": "750.5"},
        {"id": "z3", "codigo": "Z2", "nombre": "Zona 2", "cps": "1608, 1610", "valor": "1234567.891"},
    ]


@pytest.fixture
def zones(amba_zones) -> list[Zone]:
    return [Zone.model_validate(z) for z in amba_zones]


@pytest.fixture
def store(amba_zones) -> InMemoryStore:
    return InMemoryStore(
        price_lists={
            1: {"id": 1, "codigo": "GEN", "nombre": "General", "zonaPropia": True, "zonas": amba_zones},
            2: {"id": 2, "codigo": "MAY", "nombre": "Mayorista", "zonaPropia": False, "listaPrecioSeleccionada": "1"},
            3: {"id": 3, "codigo": "ENC", "nombre": "Encadenada", "zonaPropia": False, "listaPrecioSeleccionada": "2"},
            4: {"id": 4, "codigo": "VAC", "nombre": "Vacía", "zonaPropia": True, "zonas": []},
            5: {"id": 5, "codigo": "ROTA", "nombre": "Rota", "zonaPropia": False, "listaPrecioSeleccionada": "abc"},
            6: {"id": 6, "codigo": "HUERF", "nombre": "Huérfana", "zonaPropia": False, "listaPrecioSeleccionada": "99"},
            7: {"id": 7, "codigo": "SINREF", "nombre": "Sin referencia", "zonaPropia": False},
            8: {"id": 8, "codigo": "CAIDA", "nombre": "Apunta a caída", "zonaPropia": False, "listaPrecioSeleccionada": 50},
        },
        clients=[
            {"id": 10, "codigo": "ACME", "nombreFantasia": "Acme SA", "listaPreciosId": 2},
            {"id": 11, "codigo": "SINLISTA", "nombreFantasia": "Sin lista"},
        ],
        failing_ids={50},
    )
