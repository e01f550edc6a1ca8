import logging
import os
from typing import NamedTuple

MAX_PORT = 65535


class Settings(NamedTuple):
    host: str
    port: int
    threads: int
    log_level: str


def _positive_int(name: str, default: str, maximum=None) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must be at most {maximum}, got {value}")
    return value


def _log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    # getLevelName maps known names to their int value
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("COUNTER_HOST", "127.0.0.1"),
        port=_positive_int("COUNTER_PORT", "3000", maximum=MAX_PORT),
        threads=_positive_int("COUNTER_THREADS", "20"),  # waitress worker pool
        log_level=_log_level("LOG_LEVEL", "INFO"),
    )
