from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from threading import Lock
from typing import Dict, Mapping, Optional

from models.sensors import Sensor, SensorDataNotFoundError


class DataRepository(ABC):
    """Storage contract for the latest reading of each sensor."""

    @abstractmethod
    def write(self, sensor: Sensor, value: int) -> None:
        ...

    @abstractmethod
    def read(self, sensor: Sensor) -> int:
        """Return the current reading or raise ``SensorDataNotFoundError``."""


class InMemoryDataRepository(DataRepository):

    def __init__(self, initial: Optional[Mapping[Sensor, int]] = None) -> None:
        if initial is None:
            initial = {sensor: 0 for sensor in Sensor}
        self._data: Dict[Sensor, int] = dict(initial)
        self._lock = Lock()

    def write(self, sensor: Sensor, value: int) -> None:
        with self._lock:
            self._data[sensor] = value

    def read(self, sensor: Sensor) -> int:
        with self._lock:
            value = self._data.get(sensor)
        if value is None:
            raise SensorDataNotFoundError(sensor)
        return value


@lru_cache
def build_default_repository() -> InMemoryDataRepository:
    return InMemoryDataRepository()
