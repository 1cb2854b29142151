"""
Application configuration.

Controls snapshot persistence, the reference year for pick discounting and
API/logging settings. All settings can be overridden via environment
variables.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


@dataclass
class AppConfig:
    """Runtime configuration for the calculator."""

    # Snapshot file; empty disables file persistence
    snapshot_path: str = field(
        default_factory=lambda: os.getenv("DYNASTY_SNAPSHOT_PATH", "~/.dynasty/snapshot.json")
    )

    # Reference year for pick discounting (None = this calendar year)
    current_year_override: Optional[int] = field(
        default_factory=lambda: _env_int("DYNASTY_CURRENT_YEAR")
    )

    log_level: str = field(default_factory=lambda: os.getenv("DYNASTY_LOG_LEVEL", "INFO"))

    # API server
    api_host: str = field(default_factory=lambda: os.getenv("DYNASTY_API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: _env_int("DYNASTY_API_PORT") or 8000)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def current_year(self) -> int:
        return self.current_year_override or date.today().year

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 1 <= self.api_port <= 65535:
            errors.append(f"DYNASTY_API_PORT out of range: {self.api_port}")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL
        ):
            errors.append(f"Unknown DYNASTY_LOG_LEVEL: {self.log_level}")
        if self.current_year_override is not None and self.current_year_override < 1900:
            errors.append(f"DYNASTY_CURRENT_YEAR looks wrong: {self.current_year_override}")
        return errors


# Singleton config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process."""
    level_name = (level or get_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
