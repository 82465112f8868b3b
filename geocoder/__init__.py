"""
Nominatim Geocoder Client Library

This module provides a synchronous Python client for Nominatim
(nominatim.openstreetmap.org or a self-hosted instance) with typed results
and a distinct exception per failure kind.

Example usage:
    from geocoder import NominatimGeocoder, NoResultsError, initLogging

    initLogging({"level": "DEBUG", "console": True})

    geocoder = NominatimGeocoder("zip_code_locator")

    # Forward geocoding
    location = geocoder.geocode({"postalcode": "90210", "country": "US"})

    # All matches
    locations = geocoder.geocode({"city": "San Francisco", "country": "US"}, exactlyOne=False)

    # Reverse geocoding
    try:
        location = geocoder.reverse(34.0736, -118.4004)
    except NoResultsError:
        location = None
"""

from geocoder.client import NominatimGeocoder
from geocoder.constants import DEFAULT_DOMAIN, DEFAULT_USER_AGENT, REJECTED_USER_AGENTS
from geocoder.exceptions import (
    DecodeError,
    GeocoderError,
    InvalidConfigurationError,
    NoResultsError,
    RequestFailedError,
    TransportError,
)
from geocoder.logging_utils import initLogging
from geocoder.models import AddressPayload, Location, LocationPayload, ReverseErrorPayload

__all__ = [
    "NominatimGeocoder",
    "Location",
    "AddressPayload",
    "LocationPayload",
    "ReverseErrorPayload",
    "GeocoderError",
    "InvalidConfigurationError",
    "TransportError",
    "RequestFailedError",
    "DecodeError",
    "NoResultsError",
    "DEFAULT_DOMAIN",
    "DEFAULT_USER_AGENT",
    "REJECTED_USER_AGENTS",
    "initLogging",
]
