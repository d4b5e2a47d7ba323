"""Servicios del Core: resolución de zonas, matcher de CPs, cordones y cotización.

Se exponen aquí los puntos de entrada que consume la UI/CLI.
"""

from core.services.cordon_classifier import classify
from core.services.price_list_resolver import PriceListResolver
from core.services.shipping_quote import ShippingQuoteService
from core.services.zone_matcher import ZoneTable, compile_zone_table, match_zone

__all__ = [
    "PriceListResolver",
    "ShippingQuoteService",
    "ZoneTable",
    "classify",
    "compile_zone_table",
    "match_zone",
]
