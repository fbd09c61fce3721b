"""League API client module."""

from league_core.api.client import LeagueAPI
from league_core.api.keys import ApiKey, KeyStore
from league_core.api.models import (
    SummonerIdParams,
    TournamentCodeParameters,
    TournamentCodeUpdateParameters,
    ProviderRegistrationParameters,
    TournamentRegistrationParameters,
)
from league_core.api.exceptions import (
    LeagueError,
    ConfigurationError,
    MissingTournamentKeyError,
    UnknownPlatformError,
    ResponseParseError,
    APIError,
    RateLimitError,
)

__all__ = [
    "LeagueAPI",
    "ApiKey",
    "KeyStore",
    "SummonerIdParams",
    "TournamentCodeParameters",
    "TournamentCodeUpdateParameters",
    "ProviderRegistrationParameters",
    "TournamentRegistrationParameters",
    "LeagueError",
    "ConfigurationError",
    "MissingTournamentKeyError",
    "UnknownPlatformError",
    "ResponseParseError",
    "APIError",
    "RateLimitError",
]
