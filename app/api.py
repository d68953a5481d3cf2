"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends, Request, Response, status

from app.schemas import ErrorResponse, SensorDataPayload
from models.sensors import Sensor
from services.sensor_service import SensorService

hardware_router = APIRouter(prefix="/api/hardware", tags=["hardware"])
webclient_router = APIRouter(prefix="/api/webclient", tags=["webclient"])
router = APIRouter()


def get_sensor_service(request: Request) -> SensorService:
    return request.app.state.sensor_service


@hardware_router.put(
    "/temperature",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Push a new temperature reading from a device.",
)
async def update_temperature(
    payload: SensorDataPayload,
    service: SensorService = Depends(get_sensor_service),
) -> Response:
    service.update_data(Sensor.TEMPERATURE, payload.data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@hardware_router.put(
    "/pressure",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Push a new pressure reading from a device.",
)
async def update_pressure(
    payload: SensorDataPayload,
    service: SensorService = Depends(get_sensor_service),
) -> Response:
    service.update_data(Sensor.PRESSURE, payload.data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@webclient_router.get(
    "/sensor",
    summary="Current readings of all sensors as one object.",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_sensor_status(
    service: SensorService = Depends(get_sensor_service),
) -> Dict[str, int]:
    return service.snapshot()


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
