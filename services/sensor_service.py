"""Business layer between the HTTP routes and the reading store."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict

from datastore.memory import DataRepository, build_default_repository
from models.sensors import Sensor, SensorDataNotFoundError

logger = logging.getLogger(__name__)


class SensorService:
    """Stateless façade translating sensor operations into store calls."""

    def __init__(self, repository: DataRepository) -> None:
        self.repository = repository

    def update_data(self, sensor: Sensor, value: int) -> None:
        self.repository.write(sensor, value)
        logger.debug("Reading updated", extra={"sensor": sensor.name, "value": value})

    def retrieve_data(self, sensor: Sensor) -> int:
        try:
            return self.repository.read(sensor)
        except SensorDataNotFoundError:
            logger.warning("Reading missing from store", extra={"sensor": sensor.name})
            raise

    def snapshot(self) -> Dict[str, int]:
        """Current reading of every sensor keyed by sensor name.

        Fails as a whole when any single sensor has no reading.
        """
        return {sensor.name: self.retrieve_data(sensor) for sensor in Sensor}


@lru_cache
def build_default_service() -> SensorService:
    """Factory that wires the service to the process-wide store."""
    return SensorService(repository=build_default_repository())
