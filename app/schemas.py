"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictInt

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class SensorDataPayload(BaseModel):
    """Body sent by a device when it pushes a new reading."""

    data: StrictInt = Field(
        ...,
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Latest reading of the sensor as a signed 32-bit integer.",
    )


class ErrorResponse(BaseModel):
    """Error body returned when a sensor operation fails."""

    detail: str
    sensor: Optional[str] = None
