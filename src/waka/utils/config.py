"""Global configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

CONFIG_DIR_ENV = "WAKA_INSTALL_CONFIG_DIR"


class ConfigError(Exception):
    pass


class Settings(BaseModel):
    skip_editors: list[str] = Field(default_factory=list)
    verbose: bool = False


def global_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".config" / "waka-install"


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Could not read {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data


def save_global_config(config: dict) -> None:
    config_dir = global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2))


def load_settings() -> Settings:
    try:
        return Settings.model_validate(load_global_config())
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
