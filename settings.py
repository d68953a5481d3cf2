from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_HOST_ENV = "SENSOR_SERVER_HOST"
_PORT_ENV = "SENSOR_SERVER_PORT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_port(default: int) -> int:
    value = os.getenv(_PORT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if 0 < parsed < 65536 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        host=_read_str_env(_HOST_ENV, DEFAULT_HOST),
        port=_read_port(DEFAULT_PORT),
        log_level=_read_log_level("INFO"),
    )
