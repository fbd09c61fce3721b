"""
Common helper utilities.

Small string helpers shared by the client and its callers.
"""

import re
from typing import Iterable, Union

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&]*")


def unique_name(name: str) -> str:
    """
    Get the unique reserved name of a summoner.

    This is the name the summoner endpoints key their results by: the
    summoner name without spaces, all lowercase.

    Args:
        name: Complete name of the summoner

    Returns:
        Indexed unique name
    """
    return name.replace(" ", "").lower()


def join_ids(ids: Union[str, int, Iterable[Union[str, int]]]) -> str:
    """Join identifiers into the comma-separated form used in paths."""
    if isinstance(ids, (str, int)):
        return str(ids)
    return ",".join(str(i) for i in ids)


def redact_api_key(url: str) -> str:
    """Replace the api_key query value so URLs can be logged."""
    return _API_KEY_PATTERN.sub(r"\1***", url)
