"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ZoneQuote
from core.services.zone_matcher import ZoneTable


def print_banner(console: Console) -> None:
    title = Text("Zonas TMS", style="bold cyan")
    subtitle = Text("Zonas de entrega • Listas de precios • Cordones AMBA", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_zones_table(table: ZoneTable, *, title: str = "Zonas") -> Table:
    """Tabla Rich con las zonas resueltas y su precio (o '-')."""

    out = Table(title=title)
    out.add_column("Código", style="cyan", no_wrap=True)
    out.add_column("Zona", style="white")
    out.add_column("CPs", style="dim", overflow="fold")
    out.add_column("Valor", style="green", justify="right")
    for zone, price in table.as_rows():
        out.add_row(zone.codigo or "-", zone.nombre or "-", zone.cps or "", price)
    return out


def build_quote_panel(quote: ZoneQuote) -> Panel:
    """Panel para presentar el resultado de una cotización."""

    body = Text()
    body.append("Zona: ", style="bold")
    body.append(f"{quote.zone_name}\n")
    body.append("Código postal: ", style="bold")
    body.append(f"{quote.postal_code.digits}\n")
    body.append("Precio: ", style="bold")
    body.append(quote.price_label, style="bold green" if quote.price else "dim")
    return Panel(body, title=Text("Cotización", style="bold yellow"), border_style="yellow")
