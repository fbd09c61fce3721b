"""Tests for response normalization."""

import httpx
import pytest

from league_core.api.exceptions import APIError, RateLimitError, ResponseParseError
from league_core.api.response import normalize_response


class TestSuccessfulResponses:
    """Test bodies without an error envelope."""

    def test_object_returned_as_is(self):
        assert normalize_response('{"id":1,"name":"x"}', {}) == {"id": 1, "name": "x"}

    def test_list_returned_as_is(self):
        assert normalize_response('["6.1.1", "6.1.0"]', {}) == ["6.1.1", "6.1.0"]

    def test_scalar_returned_as_is(self):
        assert normalize_response("42", {}) == 42

    def test_success_status_envelope(self):
        body = '{"status": {"status_code": 200, "message": "ok"}, "id": 3}'
        assert normalize_response(body, {})["id"] == 3

    def test_non_envelope_status_field(self):
        # A status string is payload data, not an error envelope
        body = '{"id": 7, "status": "ACTIVE"}'
        assert normalize_response(body, {}) == {"id": 7, "status": "ACTIVE"}

    def test_empty_body_accepted_when_allowed(self):
        assert normalize_response("", {}, allow_empty=True) is None
        assert normalize_response("  \n", {}, allow_empty=True) is None


class TestErrorEnvelopes:
    """Test error status envelopes."""

    def test_not_found(self):
        body = '{"status":{"status_code":404,"message":"not found"}}'
        with pytest.raises(APIError) as exc_info:
            normalize_response(body, {})

        error = exc_info.value
        assert not isinstance(error, RateLimitError)
        assert error.status_code == 404
        assert error.message == 'Server responded with error 404 : "not found"'

    def test_rate_limit(self):
        body = '{"status":{"status_code":429,"message":"rate limited"}}'
        headers = httpx.Headers({"Retry-After": "5", "X-Rate-Limit-Type": "user"})

        with pytest.raises(RateLimitError) as exc_info:
            normalize_response(body, headers)

        error = exc_info.value
        assert error.retry_after == 5
        assert error.limit_type == "user"
        assert error.status_code == 429
        assert "429" in error.message and "rate limited" in error.message

    def test_rate_limit_is_api_error(self):
        body = '{"status":{"status_code":429,"message":"rate limited"}}'
        with pytest.raises(APIError):
            normalize_response(body, {"retry-after": "1", "x-rate-limit-type": "service"})

    def test_rate_limit_without_headers(self):
        body = '{"status":{"status_code":429,"message":"rate limited"}}'
        with pytest.raises(RateLimitError) as exc_info:
            normalize_response(body, {})
        assert exc_info.value.retry_after is None
        assert exc_info.value.limit_type is None

    def test_envelope_wins_over_http_status(self):
        body = '{"status":{"status_code":403,"message":"Forbidden"}}'
        with pytest.raises(APIError) as exc_info:
            normalize_response(body, {}, status_code=200)
        assert exc_info.value.status_code == 403

    def test_status_without_code_is_error(self):
        body = '{"status": {"message": "Forbidden"}}'
        with pytest.raises(APIError) as exc_info:
            normalize_response(body, {})

        error = exc_info.value
        assert not isinstance(error, RateLimitError)
        assert error.status_code is None
        assert "Forbidden" in error.message


class TestParseErrors:
    """Test invalid bodies."""

    def test_invalid_json(self):
        with pytest.raises(ResponseParseError) as exc_info:
            normalize_response("<html>Bad Gateway</html>", {}, status_code=502)

        assert exc_info.value.status_code == 502
        assert "Bad Gateway" in exc_info.value.response_body

    def test_empty_body(self):
        with pytest.raises(ResponseParseError):
            normalize_response("", {}, status_code=503)
        with pytest.raises(ResponseParseError):
            normalize_response("  \n", {})

    def test_parse_error_is_not_api_error(self):
        with pytest.raises(ResponseParseError) as exc_info:
            normalize_response("{not json", {})
        assert not isinstance(exc_info.value, APIError)
