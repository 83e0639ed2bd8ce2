"""YAML config loader; the environment wins over the file."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from weathercli.config.defaults import API_KEY_ENV, DEFAULT_CONFIG
from weathercli.config.schema import AppConfig
from weathercli.errors import ConfigError

logger = logging.getLogger(__name__)


def load_config(path: str | Path = DEFAULT_CONFIG) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file is not an error; the API key can come from the
    OPEN_WEATHER_MAP_API_KEY environment variable, which wins over the file.
    """
    path = Path(path)
    raw: dict = {}
    if path.exists():
        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"could not read config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"config file {path} must contain a mapping")
        # keys are matched case-insensitively
        raw = {str(k).lower(): v for k, v in raw.items()}
    else:
        logger.debug("Config file %s not found, using environment only", path)

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config in {path}: {e}") from e


def require_api_key(config: AppConfig) -> str:
    key = config.open_weather_map_api_key.strip()
    if not key:
        raise ConfigError(
            f"no API key configured; set {API_KEY_ENV} or add "
            "open_weather_map_api_key to the config file"
        )
    return key
