"""Parseo y formato de precios (convención es-AR)."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CURRENCY_SYMBOL = "$"
_MAX_FRACTION = Decimal("0.001")


def parse_amount(valor: str | None) -> float | None:
    """Convierte el `valor` textual de una zona a float.

    Devuelve None para vacío, texto no numérico o valores no finitos.
    """

    if valor is None:
        return None
    text = str(valor).strip()
    if not text:
        return None
    try:
        amount = float(text)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def format_amount(amount: float) -> str:
    """`1234.5` -> `1.234,5`: separador de miles `.`, decimal `,`, hasta 3 decimales."""

    # repr() da el decimal más corto que identifica al float (1.0005, no 1.000499...).
    value = Decimal(repr(float(amount)))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        quantized = value.quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)
    whole, _, fraction = f"{quantized:,f}".partition(".")
    whole = whole.replace(",", ".")
    fraction = fraction.rstrip("0")
    if whole in ("-0", "-") and not fraction:
        whole = "0"
    return f"{whole},{fraction}" if fraction else whole


def format_price(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{format_amount(amount)}"
