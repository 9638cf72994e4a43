"""infocast CLI (typer + rich).

Commands:
- `info`: system info of the remote service.
- `weather`: forecast table (empty on failure, with an inline error).
- `dashboard`: both, optionally exported to JSON.
- `doctor`: configuration and connectivity checks.
- `config set-url` / `config show`: manage the per-user configuration.

All data access goes through `RemoteDataClient`; this layer only decides
what to print and which exit code to return.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from adapters.json_exporter import export_dashboard_json
from adapters.remote_data_client import INFO_PATH, WEATHER_PATH, RemoteDataClient
from cli import doctor
from cli.ui_components import (
    build_error_panel,
    build_forecast_table,
    build_system_info_panel,
    print_banner,
)
from core.config import AppSettings, ConfigMissingError, write_user_env_vars
from core.services.dashboard import DashboardView, apply_system_info, apply_weather, load_dashboard

app = typer.Typer(no_args_is_help=True, help="System info and weather forecast from a remote service.")
config_app = typer.Typer(no_args_is_help=True, help="Manage the per-user configuration.")
app.add_typer(config_app, name="config")
app.command(name="doctor")(doctor.run)

_console = Console()


def _trace(client: RemoteDataClient, path: str, verbose: bool) -> None:
    if not verbose:
        return
    try:
        _console.log(f"GET {client.endpoint_url(path)}", style="dim")
    except ConfigMissingError:
        _console.log("API base URL is not configured", style="dim")


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))


def _finish(view: DashboardView) -> None:
    if view.errors:
        _console.print(build_error_panel(view.errors))
        raise typer.Exit(code=1)


@app.command()
def info(
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON instead of a panel."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the request being made."),
) -> None:
    """Show the remote service's system info."""

    client = RemoteDataClient(AppSettings())
    _trace(client, INFO_PATH, verbose)

    view = DashboardView()
    apply_system_info(view, asyncio.run(client.fetch_system_info()))

    if json_output:
        _echo_json(view.to_dict()["systemInfo"])
    elif view.system_info is not None:
        _console.print(build_system_info_panel(view.system_info))
    _finish(view)


@app.command()
def weather(
    json_output: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the request being made."),
) -> None:
    """Show the weather forecast."""

    client = RemoteDataClient(AppSettings())
    _trace(client, WEATHER_PATH, verbose)

    view = DashboardView()
    apply_weather(view, asyncio.run(client.fetch_weather_forecast()))

    if json_output:
        _echo_json(view.to_dict()["weatherForecast"])
    else:
        _console.print(build_forecast_table(view.forecasts))
    _finish(view)


@app.command()
def dashboard(
    no_weather: bool = typer.Option(False, "--no-weather", help="Only fetch system info."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the snapshot as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the requests being made."),
) -> None:
    """Fetch system info and forecast side by side."""

    client = RemoteDataClient(AppSettings())
    print_banner(_console)
    _trace(client, INFO_PATH, verbose)
    if not no_weather:
        _trace(client, WEATHER_PATH, verbose)

    view = asyncio.run(load_dashboard(client, include_weather=not no_weather))

    if view.system_info is not None:
        _console.print(build_system_info_panel(view.system_info))
    if view.weather_requested:
        _console.print(build_forecast_table(view.forecasts))

    if output is not None:
        path = export_dashboard_json(view=view, output_path=output)
        _console.print(f"[green]Snapshot saved to:[/green] {path}")

    _finish(view)


@config_app.command(name="set-url")
def set_url(url: str = typer.Argument(..., help="Base URL of the remote service.")) -> None:
    """Store the API base URL in the user config .env."""

    url = url.strip()
    if not url:
        raise typer.BadParameter("url must not be empty")

    env_path = write_user_env_vars({"INFOCAST_API_BASE_URL": url})
    _console.print(f"[green]Saved API base URL to:[/green] {env_path}")


@config_app.command(name="show")
def show() -> None:
    """Print the effective settings."""

    settings = AppSettings()
    table = Table(title="infocast settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("api_base_url", settings.api_base_url or "(not set)")
    table.add_row("http_timeout_seconds", f"{settings.http_timeout_seconds:g}")
    table.add_row("user_agent", settings.user_agent)
    _console.print(table)


def run() -> None:
    app()
