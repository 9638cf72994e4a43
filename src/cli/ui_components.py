"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The same panels/tables are reused by `info`, `weather` and `dashboard`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import SystemInfo, WeatherForecast


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive dashboard only)."""

    title = Text("infocast", style="bold cyan")
    subtitle = Text("System info • Weather forecast", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_system_info_panel(info: SystemInfo) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Date/time", info.current_date_time.isoformat(sep=" "))
    table.add_row("Containerized", "yes" if info.is_containerized else "no")
    table.add_row("Hostname", info.hostname)
    table.add_row("System", info.system_info)
    return Panel(table, title=Text("System info", style="bold green"), border_style="green")


def build_forecast_table(forecasts: Sequence[WeatherForecast]) -> Table:
    """Forecast table; server order is kept as-is."""

    table = Table(title="Weather Forecast")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Temp. (C)", justify="right")
    table.add_column("Temp. (F)", justify="right")
    table.add_column("Summary", style="magenta")
    for forecast in forecasts:
        table.add_row(
            forecast.date.isoformat(),
            str(forecast.temperature_c),
            str(forecast.temperature_f),
            forecast.summary or "-",
        )
    return table


def build_error_panel(messages: Iterable[str]) -> Panel:
    body = Text()
    for message in messages:
        body.append(f"- {message}\n")
    return Panel(body, title=Text("Errors", style="bold red"), border_style="red")
