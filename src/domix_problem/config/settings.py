"""Configuration for processes that embed the failure model."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environments supported by the package."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for application output")
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization"],
        description="Fields that should be redacted in logs",
    )


class ProblemSettings(BaseSettings):
    """Top level settings read from ``PROBLEM_`` prefixed environment variables."""

    environment: Environment = Environment.DEV
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="PROBLEM_", env_nested_delimiter="__")


ENVIRONMENT_DEFAULTS: Mapping[Environment, dict[str, Any]] = {
    Environment.DEV: {"logging": {"level": "DEBUG"}},
    Environment.STAGING: {"logging": {"level": "INFO"}},
    Environment.PROD: {"logging": {"level": "WARNING"}},
}


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = value
    return target


def load_settings(environment: str | None = None) -> ProblemSettings:
    """Load settings, layering explicit environment variables over the presets."""
    env_value = (environment or os.getenv("PROBLEM_ENV", "dev")).lower()
    env = Environment(env_value)
    try:
        base_settings = ProblemSettings()
    except ValidationError as err:
        raise RuntimeError(f"Invalid configuration: {err}") from err
    merged = _deep_update({}, ENVIRONMENT_DEFAULTS.get(env, {}))
    merged = _deep_update(merged, base_settings.model_dump(exclude_unset=True))
    merged["environment"] = env
    return ProblemSettings.model_validate(merged)


@lru_cache(maxsize=1)
def get_settings() -> ProblemSettings:
    """Cached accessor used by production code."""
    return load_settings()


__all__ = [
    "ENVIRONMENT_DEFAULTS",
    "Environment",
    "LoggingSettings",
    "ProblemSettings",
    "get_settings",
    "load_settings",
]
