"""
Nominatim Geocoder Data Models

This module defines TypedDict models for the raw Nominatim JSON responses
and the immutable Location record the client returns.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from typing_extensions import NotRequired, TypedDict

from .exceptions import DecodeError


class AddressPayload(TypedDict, total=False):
    """Structured address components, dood!

    All fields are optional as different locations have different address structures.
    """

    house_number: str
    road: str
    suburb: str
    city: str
    town: str
    village: str
    county: str
    state: str
    postcode: str
    country: str
    country_code: str  # ISO country code (e.g., "us")


class LocationPayload(TypedDict):
    """Single object from /search (array element) or /reverse, dood!"""

    display_name: str  # Full display name
    lat: str  # Latitude (string in API response)
    lon: str  # Longitude (string in API response)
    address: NotRequired[AddressPayload]  # Present for reverse or addressdetails=1


class ReverseErrorPayload(TypedDict):
    """What /reverse answers with when nothing is found (HTTP 200)"""

    error: str  # E.g. "Unable to geocode"


# Response types for each endpoint
SearchResponse = List[LocationPayload]  # /search returns array
ReverseResponse = LocationPayload  # /reverse returns single object


@dataclass(frozen=True)
class Location:
    """Geographical location with display name, latitude and longitude.

    Coordinates are kept as the strings the service sent, so no precision is lost.
    """

    displayName: str
    lat: str
    lon: str
    address: Optional[Mapping[str, Any]] = field(default=None, hash=False)

    def __post_init__(self):
        if self.address is not None and not isinstance(self.address, MappingProxyType):
            object.__setattr__(self, "address", MappingProxyType(dict(self.address)))

    @property
    def coordinates(self) -> Tuple[float, float]:
        """Latitude and longitude as floats"""
        return float(self.lat), float(self.lon)

    @classmethod
    def fromPayload(cls, payload: Any) -> "Location":
        """Build Location from one decoded JSON object.

        Args:
            payload: Decoded JSON value expected to match LocationPayload

        Returns:
            Location record

        Raises:
            DecodeError: If payload does not have the expected shape
        """
        if not isinstance(payload, dict):
            raise DecodeError(f"expected JSON object, got {type(payload).__name__}")

        values = {}
        for key in ("display_name", "lat", "lon"):
            value = payload.get(key)
            if not isinstance(value, str):
                raise DecodeError(f"field '{key}' is missing or not a string")
            values[key] = value

        address = payload.get("address")
        if address is not None and not isinstance(address, dict):
            raise DecodeError("field 'address' is not an object")

        return cls(
            displayName=values["display_name"],
            lat=values["lat"],
            lon=values["lon"],
            address=address,
        )
