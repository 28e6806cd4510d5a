"""
config.py
---------
Central configuration module. Loads environment variables (and the .env
file, if any) once at process start and exposes them as a typed, immutable
``AppConfig`` that is passed explicitly to the database and repositories.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from errors import ConfigError

CONN_METHODS = ("tcp", "unix")


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection target and pool settings for the relational store."""
    user: str = "root"
    password: str = "root"
    conn_method: str = "tcp"
    host: str = "rdb"
    port: str = "3306"
    name: str = "ks-laboratory-backend"
    pool_min: int = 1
    pool_max: int = 5
    statement_timeout_ms: Optional[int] = None


@dataclass(frozen=True)
class AppConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    gcp_project_id: str = ""
    log_level: str = "INFO"


def _get(env: Mapping[str, str], key: str, default: str) -> str:
    # Empty values count as unset.
    value = env.get(key, "")
    return value if value else default


def _get_int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build the application configuration.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ`` after
            loading the .env file.

    Returns:
        A frozen AppConfig.

    Raises:
        ConfigError: If a value is present but invalid.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    # ── Database ──────────────────────────────────────────
    defaults = DatabaseConfig()
    conn_method = _get(environ, "DATABASE_CONN_METHOD", defaults.conn_method)
    if conn_method not in CONN_METHODS:
        raise ConfigError(
            f"DATABASE_CONN_METHOD must be one of {', '.join(CONN_METHODS)}, got {conn_method!r}"
        )

    pool_min = _get_int(environ, "DATABASE_POOL_MIN", defaults.pool_min)
    pool_max = _get_int(environ, "DATABASE_POOL_MAX", defaults.pool_max)
    if pool_min < 1 or pool_max < pool_min:
        raise ConfigError(f"invalid pool bounds: min={pool_min}, max={pool_max}")

    timeout_ms = _get_int(environ, "DATABASE_STATEMENT_TIMEOUT_MS", None)
    if timeout_ms is not None and timeout_ms <= 0:
        raise ConfigError("DATABASE_STATEMENT_TIMEOUT_MS must be positive")

    database = DatabaseConfig(
        user=_get(environ, "DATABASE_USER_NAME", defaults.user),
        password=_get(environ, "DATABASE_PASSWORD", defaults.password),
        conn_method=conn_method,
        host=_get(environ, "DATABASE_HOSTNAME", defaults.host),
        port=_get(environ, "DATABASE_PORT", defaults.port),
        name=_get(environ, "DATABASE_NAME", defaults.name),
        pool_min=pool_min,
        pool_max=pool_max,
        statement_timeout_ms=timeout_ms,
    )

    # ── Application ───────────────────────────────────────
    return AppConfig(
        database=database,
        gcp_project_id=environ.get("GCP_PROJECT_ID", ""),
        log_level=_get(environ, "LOG_LEVEL", "INFO").upper(),
    )
