"""
Configuration loader.

Loads configuration from:
1. Default values (built-in)
2. TOML config file (screener.toml or ~/.config/screener/config.toml)
3. Environment variables

Priority: env vars > config file > defaults
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import ScreenerConfig

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("screener.toml"),                                  # Current directory
    Path(".screener.toml"),                                 # Hidden in current directory
    Path.home() / ".config" / "screener" / "config.toml",  # User config
]

# Environment variable prefix
ENV_PREFIX = "SCREENER_"


class ConfigError(Exception):
    """Configuration error with helpful message."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path))


def _find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_overrides() -> dict[str, Any]:
    """Collect overrides from SCREENER_* environment variables."""
    overrides: dict[str, Any] = {}

    if universe := os.environ.get(f"{ENV_PREFIX}UNIVERSE"):
        overrides["universe"] = universe.strip().lower()

    scoring: dict[str, Any] = {}
    if mode := os.environ.get(f"{ENV_PREFIX}MODE"):
        scoring["mode"] = mode.strip().lower()
    if weights := os.environ.get(f"{ENV_PREFIX}WEIGHTS"):
        parts = [w.strip() for w in weights.split(",")]
        if len(parts) != 3:
            raise ConfigError(
                f"Expected three comma-separated weights, got {weights!r}",
                source="environment",
                field=f"{ENV_PREFIX}WEIGHTS",
            )
        scoring["weight_3m"], scoring["weight_6m"], scoring["weight_12m"] = parts
    if scoring:
        overrides["scoring"] = scoring

    if pacing := os.environ.get(f"{ENV_PREFIX}PACING_SECONDS"):
        overrides["fetch"] = {"pacing_seconds": pacing}

    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | str | None = None) -> ScreenerConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Explicit path to config file (optional)

    Returns:
        Validated ScreenerConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    config_data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        config_data = _load_toml_file(path)
    else:
        found_path = _find_config_file()
        if found_path:
            config_data = _load_toml_file(found_path)

    env_overrides = _load_env_overrides()
    if env_overrides:
        config_data = _deep_merge(config_data, env_overrides)
        logger.debug(f"Applied {len(env_overrides)} environment override(s)")

    try:
        config = ScreenerConfig(**config_data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", field=field)
        raise ConfigError(f"Invalid configuration: {e}")

    return config
