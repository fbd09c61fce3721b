"""Tests for API keys and the key store."""

import json
import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from league_core.api.exceptions import ConfigurationError, MissingTournamentKeyError
from league_core.api.keys import ApiKey, KeyStore


class TestApiKey:
    """Test ApiKey construction."""

    def test_defaults(self):
        key = ApiKey(value="abc")
        assert key.value == "abc"
        assert key.tournaments is False

    def test_immutable(self):
        key = ApiKey(value="abc")
        with pytest.raises(ValidationError):
            key.value = "other"

    def test_repr_hides_value(self):
        assert "abc" not in repr(ApiKey(value="abc"))

    def test_from_file(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"value": "file-key", "tournaments": True}, f)
            f.flush()

            try:
                key = ApiKey.from_file(Path(f.name))
                assert key.value == "file-key"
                assert key.tournaments is True
            finally:
                os.unlink(f.name)

    def test_from_file_tournaments_default(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"value": "file-key"}, f)
            f.flush()

            try:
                assert ApiKey.from_file(f.name).tournaments is False
            finally:
                os.unlink(f.name)

    def test_from_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            ApiKey.from_file(Path("/nonexistent/key.json"))

    def test_from_file_invalid_json(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.write("value: nope")
            f.flush()

            try:
                with pytest.raises(ConfigurationError):
                    ApiKey.from_file(f.name)
            finally:
                os.unlink(f.name)

    def test_from_file_missing_value(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"tournaments": True}, f)
            f.flush()

            try:
                with pytest.raises(ConfigurationError):
                    ApiKey.from_file(f.name)
            finally:
                os.unlink(f.name)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TEST_LEAGUE_KEY", "env-key")
        key = ApiKey.from_env("TEST_LEAGUE_KEY", True)
        assert key.value == "env-key"
        assert key.tournaments is True

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("TEST_LEAGUE_KEY", raising=False)
        with pytest.raises(ConfigurationError) as exc_info:
            ApiKey.from_env("TEST_LEAGUE_KEY", False)
        assert "TEST_LEAGUE_KEY" in str(exc_info.value)


class TestKeyStore:
    """Test key selection."""

    def test_general_key_selected(self):
        store = KeyStore(key=ApiKey(value="general"))
        assert store.select().value == "general"
        assert store.has_tournaments_key is False

    def test_missing_tournaments_key(self):
        store = KeyStore(key=ApiKey(value="general"))
        with pytest.raises(MissingTournamentKeyError):
            store.select(tournaments=True)

    def test_with_tournaments_key_returns_new_store(self):
        store = KeyStore(key=ApiKey(value="general"))
        updated = store.with_tournaments_key(ApiKey(value="tourney", tournaments=True))

        assert store.tournaments_key is None
        assert updated.key.value == "general"
        assert updated.select(tournaments=True).value == "tourney"
