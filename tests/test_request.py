"""Tests for query parameter encoding and URL building."""

from urllib.parse import urlsplit, parse_qsl

import pytest

from league_core.api.exceptions import UnknownPlatformError
from league_core.api.keys import ApiKey
from league_core.api.request import (
    PLATFORM_REGIONS,
    build_status_url,
    build_url,
    encode_properties,
    platform_region,
)


@pytest.fixture
def key():
    return ApiKey(value="general-key")


class TestEncodeProperties:
    """Test query parameter encoding."""

    def test_drops_none_values(self):
        encoded = encode_properties({"locale": "en_US", "version": None, "champData": None})
        assert encoded == {"locale": "en_US"}

    def test_empty_and_missing_input(self):
        assert encode_properties(None) == {}
        assert encode_properties({}) == {}

    def test_booleans_are_lowercase(self):
        encoded = encode_properties({"freeToPlay": True, "dataById": False})
        assert encoded == {"freeToPlay": "true", "dataById": "false"}

    def test_numbers_use_string_form(self):
        assert encode_properties({"count": 5, "beginTime": 1453939200000}) == {
            "count": "5",
            "beginTime": "1453939200000",
        }

    def test_values_are_percent_encoded(self):
        encoded = encode_properties({"champData": "image,tags", "name": "a b&c"})
        assert encoded["champData"] == "image%2Ctags"
        assert encoded["name"] == "a%20b%26c"

    def test_uri_component_safe_characters_kept(self):
        assert encode_properties({"q": "a-b_c.d!e~f*g'h(i)"}) == {"q": "a-b_c.d!e~f*g'h(i)"}

    def test_input_not_mutated(self):
        params = {"locale": "en_US", "version": None}
        encode_properties(params)
        assert params == {"locale": "en_US", "version": None}

    def test_key_order_does_not_change_result(self):
        a = encode_properties({"x": 1, "y": "two", "z": None})
        b = encode_properties({"z": None, "y": "two", "x": 1})
        assert a == b


class TestBuildUrl:
    """Test main API URL building."""

    def test_host_and_scheme(self, key):
        url = build_url("euw", "/api/lol/euw/v1.2/champion", {}, key)
        parts = urlsplit(url)
        assert parts.scheme == "https"
        assert parts.hostname == "euw.api.pvp.net"
        assert parts.path == "/api/lol/euw/v1.2/champion"

    def test_global_scope(self, key):
        url = build_url("global", "/api/lol/static-data/euw/v1.2/realm", {}, key)
        assert url.startswith("https://global.api.pvp.net/api/lol/static-data/euw/v1.2/realm?")

    def test_api_key_appended(self, key):
        url = build_url("na", "/path", {}, key)
        assert url == "https://na.api.pvp.net/path?api_key=general-key"

    def test_parameters_appear_once(self, key):
        encoded = encode_properties({"locale": "en_US", "version": None, "dataById": True})
        url = build_url("na", "/path", encoded, key)
        query = parse_qsl(urlsplit(url).query)
        names = [name for name, _ in query]
        assert sorted(names) == ["api_key", "dataById", "locale"]
        assert "version" not in url
        assert "null" not in url and "None" not in url

    def test_encoded_values_not_encoded_twice(self, key):
        encoded = encode_properties({"champData": "image,tags"})
        url = build_url("na", "/path", encoded, key)
        assert "champData=image%2Ctags" in url
        assert "%252C" not in url

    def test_api_key_value_is_encoded(self):
        url = build_url("na", "/path", {}, ApiKey(value="a/b+c"))
        assert url.endswith("api_key=a%2Fb%2Bc")

    def test_custom_host(self, key):
        url = build_url("kr", "/path", {}, key, host="proxy.local")
        assert urlsplit(url).hostname == "kr.proxy.local"

    def test_encoded_mapping_not_mutated(self, key):
        encoded = {"locale": "en_US"}
        build_url("na", "/path", encoded, key)
        assert encoded == {"locale": "en_US"}


class TestStatusUrl:
    """Test status shard URL building."""

    def test_plain_http_fixed_host(self):
        assert build_status_url("/shards") == "http://status.leagueoflegends.com/shards"

    def test_no_key_in_status_url(self):
        assert "api_key" not in build_status_url("/shards/euw")


class TestPlatformRegion:
    """Test platform ID to region alias mapping."""

    @pytest.mark.parametrize(
        "platform_id,region",
        [("EUW1", "euw"), ("EUN1", "eune"), ("LA1", "lan"), ("LA2", "las"), ("OC1", "oce"), ("KR", "kr")],
    )
    def test_known_platforms(self, platform_id, region):
        assert platform_region(platform_id) == region

    def test_every_platform_mapped(self):
        assert len(PLATFORM_REGIONS) == 11

    def test_unknown_platform(self):
        with pytest.raises(UnknownPlatformError) as exc_info:
            platform_region("XX9")
        assert exc_info.value.platform_id == "XX9"
