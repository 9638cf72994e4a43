"""HTTP client for the system-info / weather-forecast service.

Implementation:
- One GET per call against `{base_url}/api/info` or
  `{base_url}/api/weatherforecast`.
- The base URL is resolved on every call, so a missing setting is reported
  at first use and never triggers a request.
- Every expected failure is translated into a `Failure` value; nothing is
  logged and nothing is retried here. What to print or default is up to the
  caller.

Notes:
- A fresh `httpx.AsyncClient` is opened and closed per call; concurrent calls
  share no state.
- `temperatureF` is ignored on the wire and recomputed by the model.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings, ConfigMissingError, ConfigResolver
from core.domain.models import SystemInfo, WeatherForecast
from core.domain.results import ErrorKind, Failure, FetchResult, Success
from core.interfaces.remote_data import RemoteDataSource

T = TypeVar("T")

INFO_PATH = "/api/info"
WEATHER_PATH = "/api/weatherforecast"

_forecast_list = TypeAdapter(list[WeatherForecast])


def _parse_system_info(content: bytes) -> SystemInfo:
    return SystemInfo.model_validate_json(content)


def _parse_forecasts(content: bytes) -> list[WeatherForecast]:
    return _forecast_list.validate_json(content)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class RemoteDataClient(RemoteDataSource):
    """Fetches and decodes the two endpoints of the remote service."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        resolver: ConfigResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or (resolver.settings if resolver else AppSettings())
        self._resolver = resolver or ConfigResolver(self._settings)
        self._transport = transport

    def endpoint_url(self, path: str) -> str:
        """Full URL for `path`; raises `ConfigMissingError` like the resolver."""

        return f"{self._resolver.resolve_base_url()}{path}"

    async def fetch_system_info(self) -> FetchResult[SystemInfo]:
        return await self._fetch(INFO_PATH, _parse_system_info)

    async def fetch_weather_forecast(self) -> FetchResult[list[WeatherForecast]]:
        return await self._fetch(WEATHER_PATH, _parse_forecasts)

    async def _fetch(self, path: str, parse: Callable[[bytes], T]) -> FetchResult[T]:
        try:
            url = self.endpoint_url(path)
        except ConfigMissingError:
            return Failure(ErrorKind.CONFIG_MISSING, "base URL not configured")

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.DecodingError as exc:
            return Failure(ErrorKind.PARSE_ERROR, _describe(exc))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return Failure(ErrorKind.NETWORK_ERROR, _describe(exc))

        if not response.is_success:
            return Failure(
                ErrorKind.REMOTE_ERROR,
                f"{response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        try:
            value = parse(response.content)
        except ValidationError as exc:
            return Failure(ErrorKind.PARSE_ERROR, _describe(exc))

        return Success(value)
