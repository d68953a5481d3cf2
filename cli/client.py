from __future__ import annotations

from typing import Dict

import httpx
import typer

from cli.config import CLIConfig
from models.sensors import Sensor


class ApiClient:
    """Minimal HTTP client for the monitoring server."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def push_reading(self, sensor: Sensor, value: int) -> None:
        try:
            response = self._client.put(
                f"/api/hardware/{sensor.name.lower()}",
                json={"data": value},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)

    def get_status(self) -> Dict[str, int]:
        try:
            response = self._client.get("/api/webclient/sensor")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        payload = response.json()
        if not isinstance(payload, dict):
            raise typer.BadParameter("Unexpected response payload when reading sensors.")
        return payload

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
