"""Translation of sensor failures into HTTP responses."""

from __future__ import annotations

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.schemas import ErrorResponse
from models.sensors import SensorDataNotFoundError, SensorError

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: Dict[Type[SensorError], int] = {
    SensorDataNotFoundError: status.HTTP_404_NOT_FOUND,
    SensorError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def classify_error(exc: SensorError) -> int:
    """Pick the response status for the most specific known failure type."""
    for klass in type(exc).__mro__:
        code = _STATUS_BY_ERROR.get(klass)
        if code is not None:
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def sensor_error_handler(request: Request, exc: SensorError) -> JSONResponse:
    status_code = classify_error(exc)
    logger.error(
        "Sensor request failed: %s",
        exc,
        extra={"sensor": exc.sensor.name, "status": status_code, "path": request.url.path},
    )
    body = ErrorResponse(detail=str(exc), sensor=exc.sensor.name)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SensorError, sensor_error_handler)
