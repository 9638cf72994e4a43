"""Dashboard orchestration.

This module is the caller layer on top of a `RemoteDataSource`. It turns two
independent `FetchResult`s into a single view for front ends (CLI today,
any other entry-point later), and keeps printing out of the core.

Defaults applied here, not in the client:
- system info stays `None` when its fetch fails;
- the forecast list falls back to an empty list when its fetch fails.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from core.domain.models import SystemInfo, WeatherForecast
from core.domain.results import Failure, FetchResult, Success
from core.interfaces.remote_data import RemoteDataSource


@dataclass
class DashboardView:
    """What a front end renders after one refresh."""

    system_info: SystemInfo | None = None
    forecasts: list[WeatherForecast] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    weather_requested: bool = False

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "systemInfo": (
                self.system_info.model_dump(mode="json", by_alias=True) if self.system_info else None
            ),
            "weatherForecast": [f.model_dump(mode="json", by_alias=True) for f in self.forecasts],
            "errors": list(self.errors),
        }


def describe_failure(subject: str, failure: Failure) -> str:
    return f"Error fetching {subject}: {failure.message}"


def apply_system_info(view: DashboardView, result: FetchResult[SystemInfo]) -> None:
    if isinstance(result, Success):
        view.system_info = result.value
    else:
        view.errors.append(describe_failure("system info", result))


def apply_weather(view: DashboardView, result: FetchResult[list[WeatherForecast]]) -> None:
    view.weather_requested = True
    if isinstance(result, Success):
        view.forecasts = list(result.value)
    else:
        view.forecasts = []
        view.errors.append(describe_failure("weather data", result))


async def load_dashboard(source: RemoteDataSource, *, include_weather: bool = True) -> DashboardView:
    """Fetch system info (and optionally the forecast) and build the view.

    Both calls run concurrently and never affect each other: a failure on
    one side only adds an error message next to the other side's data.
    """

    view = DashboardView()
    if not include_weather:
        apply_system_info(view, await source.fetch_system_info())
        return view

    info_result, weather_result = await asyncio.gather(
        source.fetch_system_info(),
        source.fetch_weather_forecast(),
    )
    apply_system_info(view, info_result)
    apply_weather(view, weather_result)
    return view
