from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from app.api import hardware_router, router, webclient_router
from app.errors import register_error_handlers
from logging_config import configure_logging
from services.sensor_service import SensorService, build_default_service
from settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    repository = type(app.state.sensor_service.repository).__name__
    logger.info("Sensor service started with %s", repository)
    try:
        yield
    finally:
        logger.info("Sensor service stopped")


def create_app(service: Optional[SensorService] = None) -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Simple Monitoring Server",
        description="Latest temperature and pressure readings pushed by hardware devices.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.sensor_service = service if service is not None else build_default_service()
    app.include_router(hardware_router)
    app.include_router(webclient_router)
    app.include_router(router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
