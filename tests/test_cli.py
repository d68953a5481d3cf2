from __future__ import annotations

import json
from typing import Dict, List

import httpx
import pytest
import typer
from typer.testing import CliRunner

from cli.app import app
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from models.sensors import Sensor


class StubClient:
    def __init__(self, config) -> None:
        self.config = config
        self.pushed: List[tuple[Sensor, int]] = []
        self.status_payload: Dict[str, int] = {"TEMPERATURE": 23, "PRESSURE": 1001}
        self.closed = False

    def push_reading(self, sensor: Sensor, value: int) -> None:
        self.pushed.append((sensor, value))

    def get_status(self) -> Dict[str, int]:
        return dict(self.status_payload)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _install_stub(monkeypatch, stub: StubClient) -> None:
    def factory(config):
        stub.config = config
        return stub

    monkeypatch.setattr("cli.app.ApiClient", factory)


def test_push_temperature(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["push", "temperature", "42"])

    assert result.exit_code == 0
    assert "TEMPERATURE set to 42" in result.stdout
    assert stub.pushed == [(Sensor.TEMPERATURE, 42)]
    assert stub.closed is True


def test_push_negative_pressure(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["push", "PRESSURE", "-15"])

    assert result.exit_code == 0
    assert stub.pushed == [(Sensor.PRESSURE, -15)]


def test_push_unknown_sensor_fails(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["push", "humidity", "3"])

    assert result.exit_code != 0
    assert stub.pushed == []


def test_status_command(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["--base-url", "http://device-hub:9000/", "status"])

    assert result.exit_code == 0
    assert "Sensor Readings" in result.stdout
    assert "TEMPERATURE: 23" in result.stdout
    assert "PRESSURE: 1001" in result.stdout
    assert stub.config.base_url == "http://device-hub:9000"
    assert stub.closed is True


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://sensors.local:8081/")
    monkeypatch.setenv("CLI_TIMEOUT", "not-a-number")

    config = load_config()

    assert config == CLIConfig(base_url="http://sensors.local:8081", timeout=10.0)


def _client_with_transport(handler) -> ApiClient:
    client = ApiClient(CLIConfig(base_url="http://testserver"))
    client._client = httpx.Client(
        base_url="http://testserver", transport=httpx.MockTransport(handler)
    )
    return client


def test_api_client_push_sends_payload() -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    client = _client_with_transport(handler)
    client.push_reading(Sensor.PRESSURE, 990)
    client.close()

    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/hardware/pressure"
    assert json.loads(seen[0].content) == {"data": 990}


def test_api_client_reports_http_errors(capsys) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404, json={"detail": "[PRESSURE] Data not found", "sensor": "PRESSURE"}
        )

    client = _client_with_transport(handler)

    with pytest.raises(typer.Exit) as excinfo:
        client.get_status()
    client.close()

    assert excinfo.value.exit_code == 1
    assert "Request failed with status 404: [PRESSURE] Data not found" in capsys.readouterr().err
