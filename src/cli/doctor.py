"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.resources_loader import get_default_cordones_path, load_cordon_table

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_backend(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("lista-precios", params={"size": 1})
        return response.status_code == 200, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_cordones(settings: AppSettings) -> tuple[bool, str]:
    path = settings.cordones_path or get_default_cordones_path()
    try:
        table = load_cordon_table(path)
    except Exception as exc:
        return False, f"{path}: {exc}"
    names = ", ".join(c.nombre for c in table.cordones)
    return True, f"{path.name}: {names}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Zonas TMS Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_backend(settings))
    table.add_row("Backend", "OK" if ok_http else "FAIL", detail_http)

    ok_cordones, detail_cordones = _check_cordones(settings)
    table.add_row("Cordones", "OK" if ok_cordones else "FAIL", detail_cordones)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `zonas doctor setup-api` to point the CLI at the TMS backend."
        )
    if not ok_http or not ok_cordones:
        raise typer.Exit(code=1)


@app.command(name="setup-api")
def setup_api() -> None:
    """Interactive backend setup (stores config in the user config .env)."""

    current = AppSettings()
    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=str(current.http_timeout_seconds),
        show_default=True,
    ).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")
    try:
        if float(timeout) <= 0:
            raise ValueError
    except ValueError as exc:
        raise typer.BadParameter("timeout must be a positive number") from exc

    env_path = write_user_env_vars(
        {
            "ZONAS_API_BASE_URL": base_url,
            "ZONAS_HTTP_TIMEOUT_SECONDS": timeout,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
