"""
Tests del resolver de tablas de zonas (un único salto de indirección).

Run with: pytest tests/test_price_list_resolver.py -v
"""

import asyncio

import httpx
import pytest

from core.domain.models import Client, Delegates, NoZoneSource, OwnZones, PriceList
from core.services.price_list_resolver import PriceListResolver, parse_reference_id
from core.services.zone_matcher import match_zone


def resolve(store, price_list_id):
    return asyncio.run(PriceListResolver(store).resolve_zone_table(price_list_id))


class TestPriceListSource:

    def test_own_zones(self, amba_zones):
        price_list = PriceList.model_validate({"id": 1, "zonaPropia": True, "zonas": amba_zones})
        assert isinstance(price_list.source, OwnZones)
        assert len(price_list.source.zones) == 3

    def test_delegates(self):
        price_list = PriceList.model_validate({"id": 2, "zonaPropia": False, "listaPrecioSeleccionada": 7})
        assert price_list.source == Delegates(referenced_id="7")

    def test_nulls_from_backend(self):
        price_list = PriceList.model_validate({"id": 9, "zonaPropia": None, "zonas": None})
        assert price_list.zonas == []
        assert isinstance(price_list.source, NoZoneSource)

    def test_own_flag_wins_over_reference(self, amba_zones):
        price_list = PriceList.model_validate(
            {"id": 1, "zonaPropia": True, "zonas": amba_zones, "listaPrecioSeleccionada": "2"}
        )
        assert isinstance(price_list.source, OwnZones)


class TestParseReferenceId:

    @pytest.mark.parametrize("value, expected", [("12", 12), (" 7 ", 7), (3, 3)])
    def test_valid(self, value, expected):
        assert parse_reference_id(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "1.5", "0", "-4"])
    def test_invalid(self, value):
        assert parse_reference_id(value) is None


class TestResolveZoneTable:

    def test_own_zones_returned_in_order(self, store, zones):
        assert resolve(store, 1) == zones
        assert store.calls == [1]

    def test_single_hop_delegation(self, store, zones):
        assert resolve(store, 2) == zones
        assert store.calls == [2, 1]

    def test_malformed_zone_does_not_discard_list(self):
        from conftest import InMemoryStore

        store = InMemoryStore(
            price_lists={
                9: {
                    "id": 9,
                    "zonaPropia": True,
                    "zonas": [
                        {"nombre": "Rota", "cps": ["1700"], "valor": "1"},
                        "basura",
                        {"nombre": "Buena", "cps": "1700", "valor": "2"},
                    ],
                }
            }
        )
        result = resolve(store, 9)
        assert [z.nombre for z in result] == ["Rota", "Buena"]
        assert match_zone("1700", result).price == "$2"

    def test_second_hop_is_not_followed(self, store):
        assert resolve(store, 3) == []
        assert store.calls == [3, 2]

    def test_own_flag_with_empty_zones(self, store):
        assert resolve(store, 4) == []

    def test_malformed_reference(self, store):
        assert resolve(store, 5) == []
        assert store.calls == [5]

    def test_missing_referenced_list(self, store):
        assert resolve(store, 6) == []
        assert store.calls == [6, 99]

    def test_delegating_list_without_reference(self, store):
        assert resolve(store, 7) == []

    def test_referenced_list_backend_failure(self, store):
        assert resolve(store, 8) == []
        assert store.calls == [8, 50]

    def test_missing_list(self, store):
        assert resolve(store, 404) == []

    @pytest.mark.parametrize("value", [None, "", "x", 0])
    def test_absent_or_invalid_id_skips_backend(self, store, value):
        assert resolve(store, value) == []
        assert store.calls == []

    def test_string_id(self, store, zones):
        assert resolve(store, "1") == zones

    def test_transport_error_degrades_to_empty(self):
        class BrokenStore:
            async def get_price_list(self, price_list_id):
                raise httpx.ConnectError("connection refused")

        assert resolve(BrokenStore(), 1) == []

    def test_idempotent(self, store):
        assert resolve(store, 2) == resolve(store, 2)


class TestResolveForClient:

    def test_client_with_list(self, store, zones):
        client = Client.model_validate({"codigo": "ACME", "listaPreciosId": 2})
        assert asyncio.run(PriceListResolver(store).resolve_for_client(client)) == zones

    def test_client_without_list(self, store):
        client = Client.model_validate({"codigo": "SINLISTA"})
        assert asyncio.run(PriceListResolver(store).resolve_for_client(client)) == []
        assert asyncio.run(PriceListResolver(store).resolve_for_client(None)) == []
