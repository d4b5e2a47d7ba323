"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El backend habla camelCase en español (`zonaPropia`, `listaPrecioSeleccionada`);
  los alias permiten validar el JSON tal cual y exponer nombres pythonicos.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.postal import PostalCode

_ZONE_TEXT_FIELDS = ("id", "codigo", "nombre", "cps", "valor")


class Zone(BaseModel):
    """Bucket de precio de entrega tal como lo guarda el backend.

    Todos los campos llegan como texto; `valor` se parsea recién al cotizar
    porque una zona puede existir sin costo configurado.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = Field(default=None, description="Identificador de la zona.")
    codigo: str | None = Field(default=None, description="Código corto de la zona.")
    nombre: str | None = Field(default=None, description="Nombre visible (p.ej. 'Zona 1').")
    cps: str | None = Field(
        default=None,
        description="Patrón de códigos postales: rango 'inicio-fin' y/o lista separada por comas.",
    )
    valor: str | None = Field(default=None, description="Costo como texto decimal (p.ej. '750.5').")
    campos_invalidos: tuple[str, ...] = Field(
        default=(),
        exclude=True,
        description="Campos que llegaron con un tipo no textual y se descartaron.",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_malformed_fields(cls, data: Any) -> Any:
        # Un campo con tipo inesperado invalida solo esta zona, no la lista entera.
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        invalid: list[str] = []
        for name in _ZONE_TEXT_FIELDS:
            value = cleaned.get(name)
            if value is None or isinstance(value, str):
                continue
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                continue
            cleaned.pop(name)
            invalid.append(name)
        if invalid:
            cleaned["campos_invalidos"] = tuple(invalid)
        return cleaned

    @property
    def is_malformed(self) -> bool:
        """La zona queda en la tabla pero no iguala ningún CP."""

        return "cps" in self.campos_invalidos


class OwnZones(BaseModel):
    """La lista de precios define su propia tabla de zonas."""

    kind: Literal["own"] = "own"
    zones: list[Zone] = Field(default_factory=list)


class Delegates(BaseModel):
    """La lista de precios usa las zonas de otra lista (un único salto)."""

    kind: Literal["delegates"] = "delegates"
    referenced_id: str = Field(..., min_length=1)


class NoZoneSource(BaseModel):
    """Lista sin zonas propias y sin referencia: no hay tabla que resolver."""

    kind: Literal["none"] = "none"


ZoneSource = Annotated[Union[OwnZones, Delegates, NoZoneSource], Field(discriminator="kind")]


class PriceList(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: int | None = None
    codigo: str | None = None
    nombre: str | None = None
    zona_propia: bool = Field(default=False, alias="zonaPropia")
    zonas: list[Zone] = Field(default_factory=list)
    lista_referenciada: str | None = Field(
        default=None,
        alias="listaPrecioSeleccionada",
        description="Id (como texto) de la lista cuyas zonas se usan cuando no hay zonas propias.",
    )

    @field_validator("zona_propia", mode="before")
    @classmethod
    def _null_flag(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("zonas", mode="before")
    @classmethod
    def _null_zones(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # Elementos que ni siquiera son objetos no aportan una zona.
            return [item for item in value if isinstance(item, (dict, Zone))]
        return value

    @property
    def source(self) -> ZoneSource:
        """De dónde salen las zonas de esta lista."""

        if self.zona_propia:
            return OwnZones(zones=list(self.zonas))
        reference = (self.lista_referenciada or "").strip()
        if reference:
            return Delegates(referenced_id=reference)
        return NoZoneSource()


class Client(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | None = None
    codigo: str = Field(..., min_length=1, description="Clave de negocio única del cliente.")
    nombre_fantasia: str | None = Field(default=None, alias="nombreFantasia")
    lista_precios_id: int | None = Field(default=None, alias="listaPreciosId")


class ZoneQuote(BaseModel):
    """Resultado de cotizar un código postal contra una tabla de zonas."""

    zone: Zone
    postal_code: PostalCode
    amount: float | None = Field(
        default=None,
        description="Costo numérico; ausente si la zona no tiene `valor` parseable.",
    )
    price: str | None = Field(default=None, description="Costo formateado es-AR (p.ej. '$1.500').")

    @property
    def zone_name(self) -> str:
        return self.zone.nombre or self.zone.codigo or "-"

    @property
    def price_label(self) -> str:
        return self.price if self.price is not None else "-"

    def as_dict(self) -> dict[str, str]:
        return {"price": self.price_label, "zoneName": self.zone_name}


class Cordon(BaseModel):
    """Un cordón del AMBA: rango numérico inclusivo o enumeración de CPs."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    clave: str = Field(..., min_length=1)
    nombre: str = Field(..., min_length=1)
    desde: int | None = Field(default=None, ge=0)
    hasta: int | None = Field(default=None, ge=0)
    cps: str = Field(default="", description="Enumeración de CPs separada por comas.")

    _codigos: frozenset[str] = PrivateAttr(default_factory=frozenset)

    @model_validator(mode="after")
    def _check_shape(self) -> "Cordon":
        has_range = self.desde is not None or self.hasta is not None
        if has_range and (self.desde is None or self.hasta is None):
            raise ValueError(f"cordón {self.clave}: el rango requiere 'desde' y 'hasta'")
        if has_range and self.desde > self.hasta:
            raise ValueError(f"cordón {self.clave}: 'desde' mayor que 'hasta'")
        if not has_range and not self.cps.strip():
            raise ValueError(f"cordón {self.clave}: sin rango ni enumeración de CPs")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._codigos = frozenset(cp.strip() for cp in self.cps.split(",") if cp.strip())

    @property
    def codigos(self) -> frozenset[str]:
        return self._codigos

    def contains(self, postal_code: PostalCode) -> bool:
        if self.desde is not None and self.hasta is not None:
            if self.desde <= postal_code.number <= self.hasta:
                return True
        # Igualdad exacta contra los dígitos tal cual se ingresaron.
        return postal_code.digits in self._codigos


class CordonTable(BaseModel):
    """Tabla de cordones en orden de prioridad (el primero que contiene gana)."""

    model_config = ConfigDict(frozen=True)

    sin_zona: str = Field(default="Sin Zona", min_length=1)
    cordones: tuple[Cordon, ...] = Field(..., min_length=1)
