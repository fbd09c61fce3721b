"""
League Core - Typed async client for the League of Legends game-data API.

This module provides:
- API client with one coroutine per remote operation
- API key management (literal, JSON file, environment variable)
- Configuration management
- Logging setup
"""

from league_core.api.client import LeagueAPI
from league_core.api.keys import ApiKey, KeyStore
from league_core.api.exceptions import (
    LeagueError,
    ConfigurationError,
    MissingTournamentKeyError,
    ResponseParseError,
    APIError,
    RateLimitError,
)
from league_core.config.loader import load_config
from league_core.config.models import ClientConfig
from league_core.utils.helpers import unique_name
from league_core.utils.logging import setup_logging, get_logger

__version__ = "1.0.0"
__all__ = [
    "LeagueAPI",
    "ApiKey",
    "KeyStore",
    "LeagueError",
    "ConfigurationError",
    "MissingTournamentKeyError",
    "ResponseParseError",
    "APIError",
    "RateLimitError",
    "load_config",
    "ClientConfig",
    "unique_name",
    "setup_logging",
    "get_logger",
]
