"""CLI principal (Typer).

Comandos:
- `clasificar CP`                 cordón AMBA estático (sin backend)
- `cotizar CP --cliente/--lista`  zona y precio según la lista de precios
- `tabla LISTA_ID`                zonas efectivas de una lista
- `doctor ...`                    diagnóstico y configuración
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console

from adapters.backend_store import BackendStore
from cli import doctor
from cli.ui_components import build_quote_panel, build_zones_table, print_banner
from core.config import AppSettings
from core.domain.errors import ZonasError
from core.domain.models import ZoneQuote
from core.log_setup import configure_logging
from core.resources_loader import get_cordon_table
from core.services.cordon_classifier import classify
from core.services.shipping_quote import ShippingQuoteService
from core.services.zone_matcher import ZoneTable

app = typer.Typer(no_args_is_help=True, help="Zonas de entrega y cotización de envíos.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Nivel de log (por defecto ZONAS_LOG_LEVEL o INFO)."
    ),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


@app.command()
def clasificar(
    codigo_postal: str = typer.Argument(..., help="Código postal a clasificar."),
) -> None:
    """Clasifica un CP en CABA / Zona 1 / Zona 2 / Zona 3 / Sin Zona."""

    settings = AppSettings()
    table = get_cordon_table(settings.cordones_path)
    _console.print(classify(codigo_postal, table))


async def _quote(
    settings: AppSettings,
    codigo_postal: str,
    cliente: str | None,
    lista: int | None,
) -> ZoneQuote:
    async with BackendStore(settings) as store:
        service = ShippingQuoteService(store)
        if cliente:
            return await service.quote_for_client(cliente, codigo_postal)
        return await service.quote_for_price_list(lista, codigo_postal)


@app.command()
def cotizar(
    codigo_postal: str = typer.Argument(..., help="Código postal de destino."),
    cliente: Optional[str] = typer.Option(None, "--cliente", "-c", help="Código del cliente."),
    lista: Optional[int] = typer.Option(None, "--lista", "-l", help="Id de la lista de precios."),
    as_json: bool = typer.Option(False, "--json", help="Salida JSON (para scripts)."),
) -> None:
    """Calcula zona y precio de envío para un código postal."""

    if bool(cliente) == (lista is not None):
        raise typer.BadParameter("indicar exactamente uno de --cliente o --lista")

    settings = AppSettings()
    try:
        quote = asyncio.run(_quote(settings, codigo_postal, cliente, lista))
    except ZonasError as exc:
        if as_json:
            typer.echo(json.dumps(exc.as_dict(), ensure_ascii=False))
        else:
            _console.print(f"[red]{exc.user_message}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(quote.as_dict(), ensure_ascii=False))
        return
    _console.print(build_quote_panel(quote))


async def _zone_table(settings: AppSettings, lista: int) -> ZoneTable:
    async with BackendStore(settings) as store:
        return await ShippingQuoteService(store).zone_table(lista)


@app.command()
def tabla(
    lista: int = typer.Argument(..., help="Id de la lista de precios."),
) -> None:
    """Muestra las zonas efectivas (propias o referenciadas) de una lista."""

    settings = AppSettings()
    table = asyncio.run(_zone_table(settings, lista))
    if not len(table):
        _console.print("[yellow]Esta lista de precios no tiene zonas configuradas.[/yellow]")
        raise typer.Exit(code=1)
    _console.print(build_zones_table(table, title=f"Lista de precios {lista}"))


@app.command()
def info() -> None:
    """Muestra el banner y la configuración activa."""

    settings = AppSettings()
    print_banner(_console)
    _console.print(f"API: {settings.api_base_url}")
    _console.print(f"Timeout: {settings.http_timeout_seconds}s")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
