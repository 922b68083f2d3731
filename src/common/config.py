"""Configuration management using Pydantic Settings.

Provides environment-aware configuration with YAML file support
and environment variable overrides.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class BreedingConfig(BaseModel):
    reference_data_dir: str = ""
    debut_sire_fts_threshold: float = Field(default=13.0, ge=0.0, le=100.0)
    route_stamina_threshold: int = Field(default=70, ge=0, le=100)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class AppSettings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    environment: Environment = Environment.DEV

    breeding: BreedingConfig = Field(default_factory=BreedingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables win over values merged from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _resolve_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve ${VAR} placeholders in config values from environment."""
    result: dict[str, Any] = {}
    for key, value in config.items():
        if isinstance(value, dict):
            result[key] = _resolve_env_vars(value)
        elif isinstance(value, str):
            has_unresolved = False

            def _replace(m: re.Match[str]) -> str:
                nonlocal has_unresolved
                env_val = os.getenv(m.group(1))
                if env_val is None:
                    has_unresolved = True
                    return ""
                return env_val

            resolved = re.sub(r"\$\{(\w+)\}", _replace, value)
            # Skip values with unresolved env vars so Pydantic defaults apply
            if not has_unresolved:
                result[key] = resolved
        else:
            result[key] = value
    return result


def _load_yaml_config(env: Environment) -> dict[str, Any]:
    """Load and merge YAML config files (base + environment-specific)."""
    config_dir = Path(__file__).resolve().parent.parent.parent / "config"

    base_path = config_dir / "base.yaml"
    env_path = config_dir / f"{env.value}.yaml"

    config: dict[str, Any] = {}

    if base_path.exists():
        with open(base_path) as f:
            base_config = yaml.safe_load(f) or {}
            config = _deep_merge(config, base_config)

    if env_path.exists():
        with open(env_path) as f:
            env_config = yaml.safe_load(f) or {}
            config = _deep_merge(config, env_config)

    return _resolve_env_vars(config)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load and cache application settings.

    Loads configuration in this order (later overrides earlier):
    1. Default values
    2. base.yaml
    3. {environment}.yaml
    4. Environment variables
    """
    env_str = os.getenv("ENVIRONMENT", "dev")
    env = Environment(env_str)

    yaml_config = _load_yaml_config(env)
    return AppSettings(environment=env, **yaml_config)
