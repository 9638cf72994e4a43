"""Contract for remote data sources.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- The dashboard service and the CLI depend on this, so an HTTP client, a
  stub, or a future source can be swapped without touching them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import SystemInfo, WeatherForecast
from core.domain.results import FetchResult


@runtime_checkable
class RemoteDataSource(Protocol):
    """Minimal contract for a system-info / weather source.

    Design rules:
    - Both operations are async because they do I/O.
    - Neither raises for expected failures; they return a `Failure` value.
    - The two operations are independent of each other.
    """

    async def fetch_system_info(self) -> FetchResult[SystemInfo]:
        ...

    async def fetch_weather_forecast(self) -> FetchResult[list[WeatherForecast]]:
        ...
