from __future__ import annotations

import json

import httpx
import pytest
from typer.testing import CliRunner

from adapters.remote_data_client import RemoteDataClient
from cli import doctor
from cli import main as cli_main
from conftest import BASE_URL, INFO_PAYLOAD, route

runner = CliRunner()


@pytest.fixture
def stub_transport(monkeypatch):
    """Route every client the CLI builds through `handler` instead of the network."""

    def install(handler):
        def factory(settings):
            return RemoteDataClient(settings, transport=httpx.MockTransport(handler))

        monkeypatch.setattr(cli_main, "RemoteDataClient", factory)
        monkeypatch.setattr(doctor, "RemoteDataClient", factory)

    return install


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setenv("INFOCAST_API_BASE_URL", BASE_URL)


def test_info_json(configured, stub_transport):
    stub_transport(route)

    result = runner.invoke(cli_main.app, ["info", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["hostname"] == INFO_PAYLOAD["hostname"]
    assert data["currentDateTime"] == "2024-05-01T10:15:30"


def test_weather_table(configured, stub_transport):
    stub_transport(route)

    result = runner.invoke(cli_main.app, ["weather"])

    assert result.exit_code == 0, result.output
    assert "Freezing" in result.output
    assert "68" in result.output


def test_weather_remote_error_exits_non_zero(configured, stub_transport):
    stub_transport(lambda request: httpx.Response(500, text="server error"))

    result = runner.invoke(cli_main.app, ["weather"])

    assert result.exit_code == 1
    assert "500 - server error" in result.output


def test_missing_config_exits_non_zero(monkeypatch, stub_transport):
    monkeypatch.setenv("INFOCAST_API_BASE_URL", "")
    stub_transport(route)

    result = runner.invoke(cli_main.app, ["info"])

    assert result.exit_code == 1
    assert "base URL not configured" in result.output


def test_dashboard_exports_snapshot(configured, stub_transport, tmp_path):
    stub_transport(route)
    output = tmp_path / "snapshot.json"

    result = runner.invoke(cli_main.app, ["dashboard", "--output", str(output)])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["weatherForecast"]) == 3


def test_config_set_url_writes_user_env(tmp_path):
    result = runner.invoke(cli_main.app, ["config", "set-url", "http://saved:8080"])

    assert result.exit_code == 0, result.output
    env_file = tmp_path / "user-config" / ".env"
    assert "INFOCAST_API_BASE_URL=http://saved:8080" in env_file.read_text(encoding="utf-8")


def test_config_set_url_rejects_blank():
    result = runner.invoke(cli_main.app, ["config", "set-url", "  "])

    assert result.exit_code != 0


def test_doctor_reports_endpoints(configured, stub_transport):
    stub_transport(route)

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 0, result.output
    assert "System info endpoint" in result.output
    assert "3 forecasts" in result.output


def test_doctor_fails_without_base_url(monkeypatch):
    monkeypatch.setenv("INFOCAST_API_BASE_URL", "")

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 1
    assert "API base URL" in result.output


def test_config_show_prints_settings(configured):
    result = runner.invoke(cli_main.app, ["config", "show"])

    assert result.exit_code == 0, result.output
    assert BASE_URL in result.output
