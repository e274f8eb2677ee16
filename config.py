"""Environment-driven configuration.

Values are read once at import time; a ``.env`` file in the working
directory is loaded first.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %d", name, raw, default)
        return default


def resolve_log_level(name: str | None, default: str = "INFO") -> str:
    """Upper-cased level name, or ``default`` when logging does not know it."""
    level = (name or "").strip().upper()
    if not level:
        return default
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid LOG_LEVEL=%r, using %s", name, default)
        return default
    return level


def resolve_app_url(app_url: str | None, port: int) -> str:
    """Public URL of the app, or the local one when APP_URL is unset."""
    if app_url:
        return app_url.rstrip("/")
    return f"http://localhost:{port}"


# Parsing
SCHEDULE_MONTH = os.getenv("SCHEDULE_MONTH", "DEC").strip().upper() or "DEC"
SERVICE_CODE_PREFIX = os.getenv("SERVICE_CODE_PREFIX", "MFX")
MAX_GRID_ROWS = _int_env("MAX_GRID_ROWS", 20000)
MAX_GRID_COLUMNS = _int_env("MAX_GRID_COLUMNS", 1000)

# Logging
LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL"))

# Keep-alive
PORT = _int_env("PORT", 8501)
APP_URL = resolve_app_url(os.getenv("APP_URL"), PORT)
KEEP_ALIVE_INTERVAL_SECONDS = _int_env("KEEP_ALIVE_INTERVAL_SECONDS", 270)
KEEP_ALIVE_TIMEOUT_SECONDS = _int_env("KEEP_ALIVE_TIMEOUT_SECONDS", 10)
