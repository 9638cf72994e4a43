from __future__ import annotations

from typing import Callable

import httpx
import pytest

from adapters.remote_data_client import RemoteDataClient
from core.config import AppSettings

BASE_URL = "http://testserver"

INFO_PAYLOAD = {
    "currentDateTime": "2024-05-01T10:15:30",
    "isContainerized": True,
    "hostname": "api-7d9f",
    "systemInfo": "OS: Linux 6.1 (amd64); Note: Resource limits can vary.",
}

WEATHER_PAYLOAD = [
    {"date": "2024-05-02", "temperatureC": 20, "summary": "Mild"},
    {"date": "2024-05-01", "temperatureC": -10, "summary": "Freezing"},
    {"date": "2024-05-03", "temperatureC": 0, "summary": None},
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the developer's .env files and INFOCAST_* vars."""

    for name in ("INFOCAST_API_BASE_URL", "INFOCAST_HTTP_TIMEOUT_SECONDS", "INFOCAST_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path / "user-config")
    # The dotenv paths are fixed when AppSettings is defined.
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)


def make_settings(base_url: str | None = BASE_URL, **kwargs) -> AppSettings:
    return AppSettings(_env_file=None, api_base_url=base_url, **kwargs)


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    base_url: str | None = BASE_URL,
) -> RemoteDataClient:
    return RemoteDataClient(make_settings(base_url), transport=httpx.MockTransport(handler))


def route(request: httpx.Request) -> httpx.Response:
    """Stub of the remote service: both endpoints answer with canned JSON."""

    if request.url.path == "/api/info":
        return httpx.Response(200, json=INFO_PAYLOAD)
    if request.url.path == "/api/weatherforecast":
        return httpx.Response(200, json=WEATHER_PAYLOAD)
    return httpx.Response(404, text="not found")
