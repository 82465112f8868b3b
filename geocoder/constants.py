"""
Nominatim Geocoder Constants

This module contains defaults and fixed values for the Nominatim geocoding client.
"""

from typing import Final, FrozenSet

# Service defaults
DEFAULT_DOMAIN: Final[str] = "nominatim.openstreetmap.org"
DEFAULT_SCHEME: Final[str] = "https"
DEFAULT_TIMEOUT: Final[float] = 10.0
DEFAULT_USER_AGENT: Final[str] = "geopy/1.0"

SUPPORTED_SCHEMES: Final[FrozenSet[str]] = frozenset({"http", "https"})

# Endpoints
SEARCH_PATH: Final[str] = "/search"
REVERSE_PATH: Final[str] = "/reverse"

# Query parameters
OUTPUT_FORMAT: Final[str] = "jsonv2"
USER_AGENT_HEADER: Final[str] = "User-Agent"

# Generic user agents throttled or banned by public Nominatim
REJECTED_USER_AGENTS: Final[FrozenSet[str]] = frozenset(
    {
        "my-application",
        "my_app/1",
        "my_user_agent/1.0",
        "specify_your_app_name_here",
        DEFAULT_USER_AGENT,
    }
)

# HTTP statuses worth retrying on the caller side
RETRYABLE_STATUS_CODES: Final[FrozenSet[int]] = frozenset({429, 500, 502, 503, 504})
