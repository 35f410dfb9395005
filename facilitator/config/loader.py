"""Layered TOML loading for facilitator settings.

A deployment keeps `default.toml` plus one optional file per environment
(`development.toml`, `production.toml`, ...) in a config directory. The
environment file is merged over the defaults key by key.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "FACILITATOR_CONFIG_DIR"
ENVIRONMENT_ENV = "FACILITATOR_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE_NAME = "default.toml"

# How many ancestors of the working directory are searched for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the config directory.

    FACILITATOR_CONFIG_DIR wins when set and must exist. Otherwise the
    nearest `config/` in the working directory or its ancestors is used,
    falling back to a relative `config/`.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        config_dir = Path(override)
        if not config_dir.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return config_dir

    cwd = Path.cwd()
    for candidate_root in [cwd, *cwd.parents][:_SEARCH_DEPTH]:
        candidate = candidate_root / "config"
        if candidate.is_dir():
            return candidate
    return Path("config")


def get_environment() -> str:
    """Name of the active environment overlay."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    return tomllib.loads(file_path.read_text(encoding="utf-8"))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override, merging nested tables recursively."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """TOML files to load, lowest precedence first."""
    default_path = config_dir / DEFAULT_FILE_NAME
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create {DEFAULT_FILE_NAME} there or set {CONFIG_DIR_ENV}."
        )

    layers = [default_path]
    env_path = config_dir / f"{environment}.toml"
    if env_path.is_file():
        layers.append(env_path)
    return layers


def load_config() -> dict[str, Any]:
    """Load and merge the TOML layers for the active environment."""
    layers = config_layers(get_config_dir(), get_environment())
    return reduce(deep_merge, (load_toml(path) for path in layers), {})
