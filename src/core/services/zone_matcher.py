"""Matcher de código postal -> zona de una lista de precios.

Reglas:
- Las zonas se evalúan en el orden de la tabla y gana la primera que iguala.
  Si dos patrones se solapan, el resultado depende del orden: es el
  comportamiento vigente y los tests lo fijan.
- Un patrón inválido solo descarta su zona; no corta la búsqueda.
- Una zona sin `valor` parseable igual es un match: el precio queda ausente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from loguru import logger

from core.domain.errors import NoZonesAvailable, ZoneNotFound
from core.domain.models import Zone, ZoneQuote
from core.domain.patterns import CpsPattern, parse_cps
from core.domain.postal import PostalCode, normalize_postal_code
from core.domain.pricing import format_price, parse_amount


@dataclass(frozen=True)
class CompiledZone:
    zone: Zone
    pattern: CpsPattern | None  # None: patrón inválido, la zona nunca iguala

    def matches(self, postal_code: PostalCode) -> bool:
        return self.pattern is not None and self.pattern.matches(postal_code)


@dataclass(frozen=True)
class ZoneTable:
    """Tabla de zonas con sus patrones ya parseados."""

    entries: tuple[CompiledZone, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CompiledZone]:
        return iter(self.entries)

    @property
    def zones(self) -> list[Zone]:
        return [entry.zone for entry in self.entries]

    def find(self, postal_code: PostalCode) -> Zone | None:
        for entry in self.entries:
            if entry.matches(postal_code):
                return entry.zone
        return None

    def match(self, raw_postal_code: str | int | None) -> ZoneQuote:
        """Cotiza `raw_postal_code`.

        Lanza:
        - `InvalidPostalCode` si el código no tiene dígitos útiles.
        - `NoZonesAvailable` si la tabla está vacía.
        - `ZoneNotFound` si ninguna zona lo cubre.
        """

        postal_code = normalize_postal_code(raw_postal_code)
        if not self.entries:
            raise NoZonesAvailable()

        zone = self.find(postal_code)
        if zone is None:
            logger.debug(f"Sin zona para CP {postal_code.digits} ({len(self)} zonas evaluadas)")
            raise ZoneNotFound()

        amount = parse_amount(zone.valor)
        if amount is None:
            logger.warning(f"Zona {zone.nombre or zone.id} sin valor válido: {zone.valor!r}")
        return ZoneQuote(
            zone=zone,
            postal_code=postal_code,
            amount=amount,
            price=format_price(amount) if amount is not None else None,
        )

    def as_rows(self) -> list[tuple[Zone, str]]:
        """Zonas con su precio formateado (o '-') para listados."""

        rows: list[tuple[Zone, str]] = []
        for entry in self.entries:
            amount = parse_amount(entry.zone.valor)
            rows.append((entry.zone, format_price(amount) if amount is not None else "-"))
        return rows


def compile_zone(zone: Zone) -> CompiledZone:
    if zone.is_malformed:
        logger.warning(f"Zona {zone.nombre or zone.id or '-'} ignorada: patrón de CPs no textual")
        return CompiledZone(zone=zone, pattern=None)
    return CompiledZone(zone=zone, pattern=parse_cps(zone.cps))


def compile_zone_table(zones: Iterable[Zone]) -> ZoneTable:
    return ZoneTable(entries=tuple(compile_zone(zone) for zone in zones))


def match_zone(raw_postal_code: str | int | None, zones: Sequence[Zone] | ZoneTable) -> ZoneQuote:
    table = zones if isinstance(zones, ZoneTable) else compile_zone_table(zones)
    return table.match(raw_postal_code)
