"""Tests for helper utilities."""

from league_core.utils.helpers import join_ids, redact_api_key, unique_name


class TestUniqueName:
    """Test summoner unique names."""

    def test_spaces_removed_and_lowercased(self):
        assert unique_name("Faker The God") == "fakerthegod"

    def test_already_unique(self):
        assert unique_name("doublelift") == "doublelift"


class TestJoinIds:
    """Test identifier joining."""

    def test_string_passthrough(self):
        assert join_ids("1,2,3") == "1,2,3"

    def test_single_int(self):
        assert join_ids(42) == "42"

    def test_sequence(self):
        assert join_ids([1, 2, "3"]) == "1,2,3"


class TestRedactApiKey:
    """Test URL redaction for logs."""

    def test_key_replaced(self):
        url = "https://na.api.pvp.net/path?locale=en_US&api_key=secret"
        assert redact_api_key(url) == "https://na.api.pvp.net/path?locale=en_US&api_key=***"

    def test_url_without_key(self):
        url = "http://status.leagueoflegends.com/shards"
        assert redact_api_key(url) == url
