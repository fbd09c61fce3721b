"""
Response normalization.

Turns a raw response body into either the parsed JSON value or one of the
API exceptions. The server reports failures inside the body as a ``status``
object, so the envelope decides, not the HTTP status line.
"""

import json
from typing import Any, Mapping, Optional

from league_core.api.exceptions import APIError, RateLimitError, ResponseParseError
from league_core.utils.logging import get_logger

logger = get_logger(__name__)

SUCCESS_CODE = 200
RATE_LIMIT_CODE = 429


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _error_from_status(status: Mapping[str, Any], headers: Mapping[str, str], body: str) -> APIError:
    code = status.get("status_code")
    message = f'Server responded with error {code} : "{status.get("message")}"'

    if code == RATE_LIMIT_CODE:
        return RateLimitError(
            message,
            retry_after=_parse_retry_after(headers.get("retry-after")),
            limit_type=headers.get("x-rate-limit-type"),
            status_code=code,
            response_body=body,
        )
    return APIError(message, status_code=code, response_body=body)


def normalize_response(
    body: str,
    headers: Mapping[str, str],
    status_code: Optional[int] = None,
    allow_empty: bool = False,
) -> Any:
    """
    Parse a response body and check it for an error envelope.

    The returned value is not validated against any schema; callers get
    whatever JSON the server sent.

    Args:
        body: Raw response text
        headers: Response headers (case-insensitive mapping from httpx)
        status_code: HTTP status, only used for error context
        allow_empty: Accept an empty body as None, for endpoints with no content

    Returns:
        Parsed JSON value, or None for an accepted empty body

    Raises:
        ResponseParseError: If the body is not valid JSON
        RateLimitError: If the envelope reports 429
        APIError: If the envelope reports any other non-200 code
    """
    if allow_empty and (not body or not body.strip()):
        return None

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        preview = body[:200]
        raise ResponseParseError(
            f"Response is not valid JSON (HTTP {status_code}): {preview}",
            status_code=status_code,
            response_body=body,
        ) from e

    if isinstance(data, dict):
        status = data.get("status")
        if isinstance(status, dict) and status.get("status_code") != SUCCESS_CODE:
            logger.debug(f"Error envelope in response: {status}")
            raise _error_from_status(status, headers, body)

    return data
