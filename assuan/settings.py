from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


@dataclass
class Settings:
    """Process-wide knobs for the framing layer. Wire constants are not configurable."""

    log_level: str = "INFO"
    trace: bool = False  # log every line read/written at DEBUG


SETTINGS = Settings()


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env_path: str = ".env") -> Settings:
    """Load settings from env/.env."""
    if Path(env_path).exists():
        load_dotenv(env_path)
    SETTINGS.log_level = os.getenv("ASSUAN_LOG_LEVEL", SETTINGS.log_level).upper()
    trace = os.getenv("ASSUAN_TRACE")
    if trace is not None:
        SETTINGS.trace = _to_bool(trace)
    if not isinstance(logging.getLevelName(SETTINGS.log_level), int):
        raise ConfigError(f"Unknown log level {SETTINGS.log_level!r}")
    return SETTINGS


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or SETTINGS
    logging.basicConfig(level=settings.log_level)
    if settings.trace:
        logging.getLogger("assuan.protocol").setLevel(logging.DEBUG)


__all__ = ["ConfigError", "Settings", "SETTINGS", "load_settings", "configure_logging"]
