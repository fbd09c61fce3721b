"""Configuration models using Pydantic."""

import os
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from league_core.api.request import API_HOST, STATUS_HOST

DEFAULT_KEY_ENV = "LEAGUE_API_KEY"


def resolve_env_vars(value: str) -> str:
    """
    Resolve environment variables in a string.

    Supports formats:
    - ${VAR} - Required variable
    - ${VAR:-default} - Variable with default value
    """
    pattern = r'\$\{([^}:]+)(?::-([^}]*))?\}'

    def replacer(match):
        var_name = match.group(1)
        default = match.group(2)

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        elif default is not None:
            return default
        else:
            raise ValueError(f"Environment variable '{var_name}' is not set and has no default")

    return re.sub(pattern, replacer, value)


class KeyConfig(BaseModel):
    """Where to read one API key from."""

    value: Optional[str] = Field(default=None, description="Literal key value")
    env: Optional[str] = Field(default=None, description="Environment variable holding the key")
    file: Optional[Path] = Field(default=None, description="JSON key file")
    tournaments: bool = Field(default=False, description="Key is valid for tournament endpoints")

    @field_validator("value", "env", mode="before")
    @classmethod
    def resolve_key_vars(cls, v):
        if isinstance(v, str) and "${" in v:
            return resolve_env_vars(v)
        return v

    @field_validator("file", mode="before")
    @classmethod
    def resolve_path_vars(cls, v):
        if v is None:
            return v
        if isinstance(v, str) and "${" in v:
            v = resolve_env_vars(v)
        return Path(v).expanduser()

    @model_validator(mode="after")
    def check_single_source(self) -> "KeyConfig":
        sources = [s for s in (self.value, self.env, self.file) if s]
        if len(sources) != 1:
            raise ValueError("exactly one of value, env or file must be set")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    json_format: bool = Field(default=False)
    log_file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v.upper()


class ClientConfig(BaseModel):
    """Complete client configuration."""

    model_config = {"extra": "ignore"}

    api_key: KeyConfig = Field(default_factory=lambda: KeyConfig(env=DEFAULT_KEY_ENV))
    tournaments_key: Optional[KeyConfig] = None

    api_host: str = Field(default=API_HOST, description="Domain prefixed by the region")
    status_host: str = Field(default=STATUS_HOST, description="Status shard host")
    # None means requests never time out
    timeout: Optional[float] = Field(default=None, gt=0)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables only.

        Uses LEAGUE_API_KEY for the general key and, when set,
        LEAGUE_TOURNAMENTS_API_KEY for the tournaments key.
        """
        tournaments_key = None
        if os.environ.get("LEAGUE_TOURNAMENTS_API_KEY"):
            tournaments_key = KeyConfig(env="LEAGUE_TOURNAMENTS_API_KEY", tournaments=True)
        return cls(tournaments_key=tournaments_key)
