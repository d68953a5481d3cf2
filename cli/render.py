from __future__ import annotations

from typing import Any, Iterable, Mapping

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_status(payload: Mapping[str, Any]) -> None:
    echo_heading("Sensor Readings")
    if not payload:
        typer.echo("No readings available.")
        return
    echo_key_values(payload.items())
