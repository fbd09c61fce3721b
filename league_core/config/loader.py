"""
Configuration loader with environment variable support.

Loads client configuration from YAML files, resolves environment variables
and turns key settings into a KeyStore.
"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from league_core.api.keys import ApiKey, KeyStore
from league_core.config.models import ClientConfig, KeyConfig, resolve_env_vars
from league_core.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _resolve_dict_env_vars(d: dict) -> dict:
    """Recursively resolve environment variables in a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _resolve_dict_env_vars(value)
        elif isinstance(value, str) and "${" in value:
            result[key] = resolve_env_vars(value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Load YAML file and resolve environment variables.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML content with env vars resolved

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)

    if content is None:
        return {}

    return _resolve_dict_env_vars(content)


def load_config(path: Union[str, Path]) -> ClientConfig:
    """
    Load and validate client configuration from a YAML file.

    Example::

        api_key:
          file: ~/.league/key.json
        tournaments_key:
          env: LEAGUE_TOURNAMENTS_API_KEY
          tournaments: true
        logging:
          level: DEBUG
    """
    path = Path(path)
    logger.info(f"Loading client configuration from {path}")
    return ClientConfig(**load_yaml(path))


def load_key(config: KeyConfig) -> ApiKey:
    """Read one API key from the source named in its configuration."""
    if config.file is not None:
        key = ApiKey.from_file(config.file)
        # The file's own flag wins unless the config asks for tournaments
        if config.tournaments and not key.tournaments:
            key = ApiKey(value=key.value, tournaments=True)
        return key
    if config.env is not None:
        return ApiKey.from_env(config.env, config.tournaments)
    return ApiKey(value=config.value, tournaments=config.tournaments)


def build_key_store(config: ClientConfig) -> KeyStore:
    """
    Build the key store described by a client configuration.

    Raises:
        ConfigurationError: If a configured key cannot be read
        FileNotFoundError: If a key file doesn't exist
    """
    tournaments_key: Optional[ApiKey] = None
    if config.tournaments_key is not None:
        tournaments_key = load_key(config.tournaments_key)
    return KeyStore(key=load_key(config.api_key), tournaments_key=tournaments_key)


def configure_logging(config: ClientConfig) -> None:
    """Apply the logging section of a client configuration."""
    setup_logging(
        level=config.logging.level,
        json_format=config.logging.json_format,
        log_file=config.logging.log_file,
    )
