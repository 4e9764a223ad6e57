# File: smartlot/config.py
"""
Application configuration

Settings come from defaults, an optional YAML file and explicit
overrides (command line), in that order of precedence.

Example smartlot.yaml:

    total_spots: 10
    pricing_strategy: hourly
    price_per_hour: 10.0
    currency: NIS
    isolate_observer_errors: true
    log_level: INFO
    log_file: logs/smartlot.log
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ConfigurationError(Exception):
    """Raised when settings cannot be loaded or are invalid"""
    pass


class Settings(BaseModel):
    """Validated application settings"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    total_spots: int = Field(default=10, ge=0, description="Number of parking spots")
    pricing_strategy: str = Field(default="hourly", description="Pricing strategy type")
    price_per_hour: float = Field(default=10.0, ge=0, allow_inf_nan=False, description="Hourly rate")
    currency: str = Field(default="NIS", min_length=1)
    isolate_observer_errors: bool = Field(
        default=True,
        description="Keep notifying remaining observers when one fails"
    )
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="logs/smartlot.log")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("pricing_strategy")
    @classmethod
    def normalize_strategy(cls, value: str) -> str:
        return value.strip().lower()


def _read_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def load_settings(path: Optional[Union[str, Path]] = None, **overrides) -> Settings:
    """
    Load settings from an optional YAML file plus overrides
    Overrides whose value is None are ignored
    """
    data: Dict[str, Any] = _read_yaml(path) if path else {}
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
