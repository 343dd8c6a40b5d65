from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from calvin import config_dir

logger = logging.getLogger(__name__)

# Searched in order; JSON is read with the YAML loader as well
CONFIG_FILENAMES = ("config.yaml", "config.yml", "config.json")


class ConfigError(Exception):
    """The calvin config file exists but cannot be used."""


# =============================================================================
# CalvinConfig (~/.calvin/config.yaml or config.json)
# =============================================================================

class CalvinConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    default_domain: str = Field(default="")
    week_header_format: str = Field(default="%A %Y-%m-%d", min_length=1)


def find_config_file(directory: Path | None = None) -> Path | None:
    directory = directory if directory is not None else config_dir()
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(directory: Path | None = None) -> CalvinConfig:
    """Load and validate the user's config, falling back to defaults if absent.

    Raises:
        ConfigError: the file is unreadable, not YAML/JSON, not a mapping,
            or fails validation.
    """
    path = find_config_file(directory)
    if path is None:
        logger.debug("no config file found, using defaults")
        return CalvinConfig()

    try:
        with open(path) as f:
            raw: Any = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(raw).__name__}")

    try:
        config = CalvinConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config in {path}: {e}") from e

    logger.debug(f"loaded config from {path}")
    return config


def build_calendar_id(username: str, default_domain: str) -> str:
    """Turn a bare username into a calendar ID using the default domain."""
    if "@" in username or not default_domain:
        return username
    return f"{username}@{default_domain}"
