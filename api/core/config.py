"""
Environment-driven settings.

Settings are read once by `Settings.from_env()` and handed to `create_app()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's sslmode query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    pool_min_size: int = 1
    pool_max_size: int = 5
    command_timeout: float = 30.0
    port: int = 3000
    metrics_prefix: str = "playsafe"
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default_factory=tuple)

    @property
    def server_url(self) -> str:
        return f"http://localhost:{self.port}"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.environ.get("CORS_ORIGINS", "")
        return cls(
            database_url=sanitize_database_url(os.environ.get("DATABASE_URL", "").strip()),
            pool_min_size=_env_int("DB_POOL_MIN_SIZE", 1),
            pool_max_size=_env_int("DB_POOL_MAX_SIZE", 5),
            command_timeout=_env_float("DB_COMMAND_TIMEOUT", 30.0),
            port=_env_int("PORT", 3000),
            metrics_prefix=_env_str("METRICS_PREFIX", "playsafe"),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
