from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_status
from models.sensors import Sensor


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for pushing and reading sensor values on the monitoring server.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _parse_sensor(value: str) -> Sensor:
    try:
        return Sensor.from_path(value)
    except ValueError as exc:
        choices = ", ".join(sensor.name.lower() for sensor in Sensor)
        raise typer.BadParameter(f"{exc} Choose one of: {choices}.") from exc


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Server base URL (defaults to API_BASE_URL env or http://localhost:8080).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the server before giving up.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command(
    "push",
    context_settings={"ignore_unknown_options": True},
)
def push_command(
    ctx: typer.Context,
    sensor: str = typer.Argument(..., help="Sensor to update: temperature or pressure."),
    value: int = typer.Argument(..., help="Integer reading to store."),
) -> None:
    """Push a reading the way a hardware device does."""
    target = _parse_sensor(sensor)
    state = _get_state(ctx)
    state.client.push_reading(target, value)
    typer.secho(f"{target.name} set to {value}", fg=typer.colors.GREEN)


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Show the current reading of every sensor."""
    state = _get_state(ctx)
    payload = state.client.get_status()
    render_status(payload)
