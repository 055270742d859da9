"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from confluence_rpc.config.schema import ENV_PREFIX, ClientConfig


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".confluence_rpc" / "config.json"


def load_config(config_path: Path | None = None, **overrides: Any) -> ClientConfig:
    """
    Load configuration from file or fall back to defaults.

    ``CONF_*`` environment variables override the file; ``overrides`` that
    are not ``None`` override both.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("config file must contain a JSON object")
            data = convert_keys(raw)
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e

    # CONF_* environment variables win over the file.
    merged = {
        k: v for k, v in data.items()
        if k in ClientConfig.model_fields and not _set_in_env(k)
    }
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return ClientConfig(**merged)
    except ValueError as e:
        raise ValueError(f"Invalid confluence_rpc configuration: {e}") from e


def _set_in_env(field: str) -> bool:
    name = f"{ENV_PREFIX}{field}".upper()
    return any(key.upper() == name and value != "" for key, value in os.environ.items())


def save_config(config: ClientConfig, config_path: Path | None = None) -> Path:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(config.model_dump())

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return path


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
