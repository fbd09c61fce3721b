"""Common utilities module."""

from league_core.utils.logging import setup_logging, get_logger
from league_core.utils.helpers import unique_name, join_ids, redact_api_key

__all__ = [
    "setup_logging",
    "get_logger",
    "unique_name",
    "join_ids",
    "redact_api_key",
]
