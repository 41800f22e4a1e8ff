"""Configuration loading.

Values come from a JSON file, then environment variables, which take
precedence over the file:

- ``LUDEX_CATEGORIES_PATH`` overrides ``categories_path``
- ``LUDEX_LOG_LEVEL`` overrides ``log_level``
"""
import json
import os
from typing import Dict

from .exceptions import CatalogError

DEFAULTS = {
    'categories_path': 'categories.json',
    'log_level': 'WARNING',
}

_ENV_OVERRIDES = {
    'LUDEX_CATEGORIES_PATH': 'categories_path',
    'LUDEX_LOG_LEVEL': 'log_level',
}


class ConfigError(CatalogError):
    """The config file exists but can't be used."""


def load_config(config_path: str = 'config.json') -> Dict:
    """Return the merged configuration.

    A missing file is not an error (defaults apply).  A file that isn't a
    JSON object, or whose values have the wrong type, raises
    :class:`ConfigError`.
    """
    config = dict(DEFAULTS)
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Error parsing config file {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        config.update(loaded)

    for env_name, key in _ENV_OVERRIDES.items():
        if os.getenv(env_name):
            config[key] = os.getenv(env_name)

    _validate(config, config_path)
    return config


def _validate(config: Dict, config_path: str) -> None:
    path = config.get('categories_path')
    if not isinstance(path, str) or not path:
        raise ConfigError(f"{config_path}: categories_path must be a non-empty string")
    # log_level may be a name ("DEBUG") or a numeric logging level (10)
    level = config.get('log_level')
    if isinstance(level, bool) or not isinstance(level, (str, int)):
        raise ConfigError(f"{config_path}: log_level must be a level name or number")
