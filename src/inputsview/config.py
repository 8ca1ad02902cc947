"""Global config management for the inputsview service."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseConfig")

CONFIG_ENV_VAR = "INPUTSVIEW_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "inputsview.json"


class BaseConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    def save_json(self, path: str | Path) -> None:
        """Saves the config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.model_dump_json(indent=4))

    @classmethod
    def from_json(cls: Type[T], path: str | Path) -> T:
        """Loads the config from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.model_validate(data)

    @classmethod
    def from_dict(cls: Type[T], data: dict[str, Any]) -> T:
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json_string(self) -> str:
        return self.model_dump_json(indent=2)


class AppConfig(BaseConfig):
    permissions: list[str] = []
    inputs_path: Path = Path("saves") / "inputs.json"
    node_path: Path = Path("saves") / "node.json"
    log_level: str = "INFO"
    log_file: str | None = None
    background_refresh: bool = True


_config = AppConfig()


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from file, falling back to defaults when it does not exist."""
    global _config
    config_path = Path(path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    if config_path.exists():
        _config = AppConfig.from_json(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        _config = AppConfig()
        logger.info("No config at %s, using defaults", config_path)
    return _config


def get_config() -> AppConfig:
    return _config


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a specific config value by key (supports nested keys with dots)."""
    value: Any = _config.to_dict()
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value
