from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_ENGINE_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "engine.yaml"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    store_backend: str
    store_db_path: str
    engine_config_path: str
    log_generation_details: bool
    recommendation_limit: int


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    store_backend=(_get_env("STORE_BACKEND", "memory") or "memory").strip().lower(),
    store_db_path=_get_env("STORE_DB_PATH", "data/documents.db") or "data/documents.db",
    engine_config_path=_get_env("ENGINE_CONFIG_PATH", str(DEFAULT_ENGINE_CONFIG_PATH))
    or str(DEFAULT_ENGINE_CONFIG_PATH),
    log_generation_details=_get_env_bool("LOG_GENERATION_DETAILS", False),
    recommendation_limit=_get_env_int("RECOMMENDATION_LIMIT", 10),
)

if settings.store_backend not in {"memory", "sqlite"}:
    raise RuntimeError("STORE_BACKEND must be either 'memory' or 'sqlite'.")
