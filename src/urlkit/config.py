"""Top-level configuration loader."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/urlkit.yaml")
CONFIG_ENV_VAR = "URLKIT_CONFIG"


class HostLimits(BaseModel):
    """DNS length ceilings applied to encoded hosts when ``enforce`` is set."""

    model_config = ConfigDict(extra="ignore")

    enforce: bool = False
    max_label_length: int = 63
    max_domain_length: int = 253

    @field_validator("max_label_length", "max_domain_length", mode="before")
    @classmethod
    def _positive_int(cls, value: Any) -> int:
        number = int(value)
        if number <= 0:
            raise ValueError("length limits must be positive")
        return number


class UrlkitConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    log_level: str = "WARNING"
    host: HostLimits = Field(default_factory=HostLimits)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> str:
        level = str(value or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{level}'")
        return level


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config(path: str | Path | None = None) -> UrlkitConfig:
    """Load application configuration, falling back to defaults."""
    config_path = resolve_config_path(path)
    if not config_path.exists():
        _logger.debug("No configuration at %s; using defaults", config_path)
        return UrlkitConfig()
    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    _logger.debug("Loaded configuration from %s", config_path)
    try:
        return UrlkitConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {config_path}: {exc}") from exc


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "HostLimits",
    "UrlkitConfig",
    "load_app_config",
    "resolve_config_path",
]
