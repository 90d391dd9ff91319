"""Configuration models and loading utilities."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LotConfig(BaseModel):
    """Parking lot configuration."""

    capacity: int = 10
    reject_duplicate_registrations: bool = True

    @field_validator("capacity")
    @classmethod
    def check_capacity(cls, v: int) -> int:
        """Capacity must be a positive number of slots."""
        if v <= 0:
            raise ValueError(f"capacity must be positive, got {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept level names in any case, e.g. 'debug'."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    lot: LotConfig = LotConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)


def get_config_path() -> Path:
    """Get the configuration file path, honouring PARKING_LOT_CONFIG."""
    env_path = os.environ.get("PARKING_LOT_CONFIG")
    if env_path:
        return Path(env_path)

    return Path("config/config.yaml")
