"""Sensor identities and the failures tied to them."""

from __future__ import annotations

from enum import Enum


class Sensor(str, Enum):
    """Closed set of sensors the server keeps readings for."""

    TEMPERATURE = "TEMPERATURE"
    PRESSURE = "PRESSURE"

    @classmethod
    def from_path(cls, name: str) -> "Sensor":
        """Resolve a lower-case route segment such as ``temperature``."""
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown sensor {name!r}.") from exc


class SensorError(Exception):
    """Failure attributed to a single sensor."""

    def __init__(self, sensor: Sensor, message: str) -> None:
        super().__init__(f"[{sensor.name}] {message}")
        self.sensor = sensor


class SensorDataNotFoundError(SensorError):
    """The store holds no reading for the sensor."""

    def __init__(self, sensor: Sensor, message: str = "Data not found") -> None:
        super().__init__(sensor, message)
