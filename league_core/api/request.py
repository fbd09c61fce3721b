"""
Request construction: query parameter encoding and URL building.

Endpoints describe a request as a scope (a region code, a platform region
alias, or ``global``), a path with identifiers already interpolated, and a set
of optional query parameters. The helpers here turn that into the final URL.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote

from league_core.api.exceptions import UnknownPlatformError
from league_core.api.keys import ApiKey

API_HOST = "api.pvp.net"
STATUS_HOST = "status.leagueoflegends.com"
GLOBAL_SCOPE = "global"

# Characters left as-is by JavaScript's encodeURIComponent, besides
# alphanumerics and "_.-~" which quote() never escapes.
_URI_COMPONENT_SAFE = "!*'()"

# Platform IDs used by the championmastery and current-game endpoints,
# mapped to the region alias their host is named after.
PLATFORM_REGIONS: dict[str, str] = {
    "BR1": "br",
    "EUN1": "eune",
    "EUW1": "euw",
    "KR": "kr",
    "LA1": "lan",
    "LA2": "las",
    "NA1": "na",
    "OC1": "oce",
    "TR1": "tr",
    "RU": "ru",
    "PBE1": "pbe",
}


def platform_region(platform_id: str) -> str:
    """
    Map a platform ID to the region alias used in the hostname.

    Raises:
        UnknownPlatformError: If the platform ID is not in PLATFORM_REGIONS
    """
    try:
        return PLATFORM_REGIONS[platform_id]
    except KeyError:
        raise UnknownPlatformError(platform_id) from None


def encode_value(value: Any) -> str:
    """Percent-encode a single query value."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (list, tuple)):
        text = ",".join(str(v) for v in value)
    else:
        text = str(value)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def encode_properties(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """
    Encode optional query parameters.

    Entries whose value is None are dropped. The input mapping is not
    modified.

    Args:
        params: Parameter name to value, values may be None

    Returns:
        New dict of parameter name to percent-encoded string
    """
    if not params:
        return {}
    return {
        key: encode_value(value)
        for key, value in params.items()
        if value is not None
    }


def build_query(encoded: Mapping[str, str], key: ApiKey) -> str:
    """Serialize encoded parameters plus the ``api_key`` into a query string."""
    pairs = [f"{name}={value}" for name, value in encoded.items()]
    pairs.append(f"api_key={encode_value(key.value)}")
    return "?" + "&".join(pairs)


def build_url(
    scope: str,
    path: str,
    encoded: Mapping[str, str],
    key: ApiKey,
    host: str = API_HOST,
) -> str:
    """
    Build a fully qualified URL for the main API.

    Args:
        scope: Region code, platform region alias, or ``global``
        path: Request path with identifiers already interpolated
        encoded: Parameters as returned by encode_properties()
        key: Key whose value is sent as ``api_key``
        host: API domain the scope is prefixed to

    Returns:
        ``https://{scope}.{host}{path}?...&api_key=...``
    """
    return f"https://{scope}.{host}{path}{build_query(encoded, key)}"


def build_status_url(path: str, host: str = STATUS_HOST) -> str:
    """Build a URL for the status shard endpoints (plain HTTP, no key)."""
    return f"http://{host}{path}"
