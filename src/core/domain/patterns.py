"""Patrón de códigos postales de una zona (`cps`), parseado una sola vez.

Un `cps` como "1000-1599, 1602, 1603" se interpreta de dos formas a la vez:
- el primer tramo `inicio-fin` encontrado es un rango numérico inclusivo;
- el texto completo, separado por comas, es una enumeración de literales
  (el tramo del rango queda como literal, pero nunca iguala a un CP limpio).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from core.domain.postal import PostalCode

_RANGE = re.compile(r"(\d+)-(\d+)")


@dataclass(frozen=True)
class RangeClause:
    start: int
    end: int

    def matches(self, postal_code: PostalCode) -> bool:
        return self.start <= postal_code.number <= self.end


@dataclass(frozen=True)
class CodeSetClause:
    codes: frozenset[str]

    def matches(self, postal_code: PostalCode) -> bool:
        return postal_code.digits in self.codes or postal_code.canonical in self.codes


Clause = Union[RangeClause, CodeSetClause]


@dataclass(frozen=True)
class CpsPattern:
    clauses: tuple[Clause, ...]

    def matches(self, postal_code: PostalCode) -> bool:
        return any(clause.matches(postal_code) for clause in self.clauses)

    @property
    def range(self) -> RangeClause | None:
        for clause in self.clauses:
            if isinstance(clause, RangeClause):
                return clause
        return None


def parse_cps(cps: str | None) -> CpsPattern:
    """Parsea el campo `cps` de una zona.

    Un texto vacío (o None) produce un patrón que no iguala ningún código.
    """

    if cps is None:
        return CpsPattern(clauses=())

    clauses: list[Clause] = []
    found = _RANGE.search(cps)
    if found:
        try:
            clauses.append(RangeClause(start=int(found.group(1)), end=int(found.group(2))))
        except ValueError:
            # Extremos demasiado largos para int: el tramo queda solo como literal.
            pass

    codes = frozenset(token.strip() for token in cps.split(",") if token.strip())
    if codes:
        clauses.append(CodeSetClause(codes=codes))
    return CpsPattern(clauses=tuple(clauses))
