"""Configuration management module."""

from league_core.config.loader import (
    build_key_store,
    configure_logging,
    load_config,
    load_key,
    load_yaml,
)
from league_core.config.models import (
    ClientConfig,
    KeyConfig,
    LoggingConfig,
    resolve_env_vars,
)

__all__ = [
    "ClientConfig",
    "KeyConfig",
    "LoggingConfig",
    "build_key_store",
    "configure_logging",
    "load_config",
    "load_key",
    "load_yaml",
    "resolve_env_vars",
]
