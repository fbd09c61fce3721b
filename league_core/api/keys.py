"""
API keys and the key store held by the client.

A key is a secret value plus a flag telling whether it may be used on the
tournament-provider endpoints. The client holds one general key and,
optionally, a separate tournaments key.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from league_core.api.exceptions import ConfigurationError, MissingTournamentKeyError


class ApiKey(BaseModel):
    """A key used to access the API."""

    model_config = {"frozen": True}

    value: str
    tournaments: bool = False

    def __repr__(self) -> str:
        return f"ApiKey(value='***', tournaments={self.tournaments})"

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ApiKey":
        """
        Load a key from a JSON file.

        The file holds an object with a ``value`` string and an optional
        ``tournaments`` boolean (default false).

        Args:
            path: Path to the JSON key file

        Returns:
            Loaded key

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If the file is not a valid key object
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Key file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Key file {path} is not valid JSON: {e}") from e

        if not isinstance(content, dict):
            raise ConfigurationError(f"Key file {path} must contain a JSON object")

        try:
            return cls(
                value=content.get("value"),
                tournaments=content.get("tournaments") or False,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid key file {path}: {e}") from e

    @classmethod
    def from_env(cls, variable_name: str, tournaments: bool = False) -> "ApiKey":
        """
        Load a key from an environment variable.

        Args:
            variable_name: Name of the variable holding the key's value
            tournaments: Whether the key is valid for the tournaments endpoints

        Raises:
            ConfigurationError: If the variable is unset or empty
        """
        value = os.environ.get(variable_name)
        if not value:
            raise ConfigurationError(f"Environment variable '{variable_name}' is not set")
        return cls(value=value, tournaments=tournaments)


class KeyStore(BaseModel):
    """Immutable holder of the general key and the optional tournaments key."""

    model_config = {"frozen": True}

    key: ApiKey
    tournaments_key: Optional[ApiKey] = None

    @property
    def has_tournaments_key(self) -> bool:
        return self.tournaments_key is not None

    def require_tournaments_key(self) -> ApiKey:
        """Return the tournaments key, failing if none was added."""
        if not self.has_tournaments_key:
            raise MissingTournamentKeyError(
                "No tournaments key added. Use add_tournaments_key()."
            )
        return self.tournaments_key

    def select(self, tournaments: bool = False) -> ApiKey:
        """Pick the key used to sign a request."""
        if tournaments:
            return self.require_tournaments_key()
        return self.key

    def with_tournaments_key(self, key: ApiKey) -> "KeyStore":
        return self.model_copy(update={"tournaments_key": key})
