# src/utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got: {raw!r}") from e


def _env_float(key: str, default: float) -> float:
    raw = _env(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got: {raw!r}") from e


@dataclass(frozen=True)
class ServiceConfig:
    host: str
    port: int
    cors_origins: Tuple[str, ...]
    log_level: str


def get_service_config() -> ServiceConfig:
    """
    Configure the HTTP service via environment variables.

    Env:
      HOST         (default: 0.0.0.0)
      PORT         (default: 3000)
      CORS_ORIGINS (comma-separated, default: *)
      LOG_LEVEL    (default: INFO)
    """
    origins = _env("CORS_ORIGINS", "*") or "*"
    return ServiceConfig(
        host=_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_env_int("PORT", 3000),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


@dataclass(frozen=True)
class ClientConfig:
    api_url: str
    timeout: float


def get_client_config() -> ClientConfig:
    """
    Env:
      QUOTE_API_URL     (default: http://localhost:3000)
      QUOTE_API_TIMEOUT (seconds, default: 10)
    """
    return ClientConfig(
        api_url=(_env("QUOTE_API_URL", "http://localhost:3000") or "http://localhost:3000").rstrip("/"),
        timeout=_env_float("QUOTE_API_TIMEOUT", 10.0),
    )
