from __future__ import annotations

from dataclasses import dataclass
import os

# Project root: one level above utils/
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DEFAULT_DATA_PATH = os.path.join(_ROOT, "data", "mtcars.csv")


@dataclass(frozen=True)
class Settings:
    data_path: str
    debug: bool
    host: str
    port: int
    log_level: str


def _truthy(s: str | None) -> bool:
    return str(s or "").strip().lower() in ("1", "true", "yes", "y", "on")


def _port(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        port = int(raw.strip())
    except ValueError:
        raise ValueError(f"CARS_PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ValueError(f"CARS_PORT out of range: {port}")
    return port


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"CARS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Read settings from environment variables (or an explicit mapping)."""
    env = os.environ if env is None else env
    return Settings(
        data_path=(env.get("CARS_DATA_PATH") or DEFAULT_DATA_PATH).strip(),
        debug=_truthy(env.get("CARS_DEBUG")),
        host=(env.get("CARS_HOST") or "127.0.0.1").strip(),
        port=_port(env.get("CARS_PORT"), 8050),
        log_level=_log_level(env.get("CARS_LOG_LEVEL")),
    )
