"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.remote_data_client import RemoteDataClient
from core.config import AppSettings, ConfigMissingError, ConfigResolver, get_user_env_file
from core.domain.results import Success

_console = Console()


async def _check_endpoints(client: RemoteDataClient) -> list[tuple[str, bool, str]]:
    info, weather = await asyncio.gather(client.fetch_system_info(), client.fetch_weather_forecast())
    rows: list[tuple[str, bool, str]] = []
    if isinstance(info, Success):
        rows.append(("System info endpoint", True, f"host {info.value.hostname}"))
    else:
        rows.append(("System info endpoint", False, str(info)))
    if isinstance(weather, Success):
        rows.append(("Weather endpoint", True, f"{len(weather.value)} forecasts"))
    else:
        rows.append(("Weather endpoint", False, str(weather)))
    return rows


def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="infocast Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    try:
        base_url = ConfigResolver(settings).resolve_base_url()
    except ConfigMissingError:
        table.add_row("API base URL", "FAIL", "Not set -> run `infocast config set-url <url>`")
        _console.print(table)
        raise typer.Exit(code=1)
    table.add_row("API base URL", "OK", base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity
    rows = asyncio.run(_check_endpoints(RemoteDataClient(settings)))
    for check, ok, detail in rows:
        table.add_row(check, "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not all(ok for _, ok, _ in rows):
        raise typer.Exit(code=1)
