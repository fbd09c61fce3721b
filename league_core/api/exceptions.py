"""API exception classes."""

from typing import Optional


class LeagueError(Exception):
    """Base exception for all errors raised by league_core."""

    pass


class ConfigurationError(LeagueError):
    """Raised when the client is not configured for the requested call."""

    pass


class MissingTournamentKeyError(ConfigurationError):
    """Raised when a tournament endpoint is called without a tournaments key."""

    pass


class UnknownPlatformError(ConfigurationError):
    """Raised when a platform ID has no entry in the platform region table."""

    def __init__(self, platform_id: str):
        self.platform_id = platform_id
        super().__init__(f"Unknown platform ID: {platform_id!r}")


class ResponseParseError(LeagueError):
    """Raised when a response body is not valid JSON."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)


class APIError(LeagueError):
    """Raised when the server answers with an error status envelope."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class RateLimitError(APIError):
    """Raised when the key's rate limit is exceeded (429)."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        limit_type: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault("status_code", 429)
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
        # "user" or "service"
        self.limit_type = limit_type
