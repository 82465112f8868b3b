"""
Nominatim Geocoder Client

This module provides the main NominatimGeocoder class for forward and reverse
geocoding against a Nominatim-compatible service (OpenStreetMap by default).
"""

import json
import logging
import numbers
from collections import abc
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, Optional, Union, overload
from urllib.parse import urlencode

import httpx

from .constants import (
    DEFAULT_DOMAIN,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    OUTPUT_FORMAT,
    REJECTED_USER_AGENTS,
    REVERSE_PATH,
    SEARCH_PATH,
    SUPPORTED_SCHEMES,
    USER_AGENT_HEADER,
)
from .exceptions import (
    DecodeError,
    InvalidConfigurationError,
    NoResultsError,
    RequestFailedError,
    TransportError,
)
from .models import Location

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    """Synchronous client for the Nominatim geocoding API, dood!

    Performs exactly one blocking HTTP request per call, without caching,
    rate limiting or retries. Creates new HTTP session for each request,
    so a single instance may be shared between threads.

    Example:
        >>> from geocoder import NominatimGeocoder
        >>>
        >>> geocoder = NominatimGeocoder("zip_code_locator")
        >>>
        >>> # Forward geocoding
        >>> location = geocoder.geocode({"postalcode": "90210", "country": "US"})
        >>> print(location.displayName, location.lat, location.lon)
        >>>
        >>> # Reverse geocoding
        >>> location = geocoder.reverse(34.0736, -118.4004)
        >>> print(location.address.get("city"))

    Attributes:
        domain: Service host (default: nominatim.openstreetmap.org)
        scheme: "http" or "https" (default: https)
        userAgent: Application-specific User-Agent header value
        timeout: Whole request timeout in seconds (default: 10)
        proxies: Proxy URL per scheme (default: no proxies)
        api: Forward search endpoint URL
        reverseApi: Reverse search endpoint URL
    """

    __slots__ = (
        "domain",
        "scheme",
        "userAgent",
        "timeout",
        "proxies",
        "api",
        "reverseApi",
    )

    def __init__(
        self,
        userAgent: str,
        *,
        domain: str = DEFAULT_DOMAIN,
        scheme: str = DEFAULT_SCHEME,
        timeout: float = DEFAULT_TIMEOUT,
        proxies: Optional[Mapping[str, str]] = None,
    ):
        """Initialize Nominatim geocoder, dood!

        Args:
            userAgent: Application-specific User-Agent (required, must not be a generic placeholder)
            domain: Service host (default: nominatim.openstreetmap.org)
            scheme: URL scheme, "http" or "https" (default: https)
            timeout: Request timeout in seconds covering connect and read (default: 10)
            proxies: Proxy URL per scheme, e.g. {"https": "http://proxy:3128"} (default: None)

        Raises:
            InvalidConfigurationError: If any of the values is not acceptable
        """
        if not isinstance(userAgent, str) or not userAgent:
            raise InvalidConfigurationError("user agent is required and must be a string")
        if userAgent in REJECTED_USER_AGENTS:
            raise InvalidConfigurationError(f"using Nominatim with user agent {userAgent} is discouraged")
        if not isinstance(scheme, str) or scheme not in SUPPORTED_SCHEMES:
            raise InvalidConfigurationError(f"unsupported scheme '{scheme}', expected http or https")
        if not isinstance(domain, str) or not domain:
            raise InvalidConfigurationError("domain is required and must be a string")
        if any(c.isspace() or c in "/?#@" for c in domain):
            raise InvalidConfigurationError(f"domain must be a bare host[:port], got '{domain}'")
        if isinstance(timeout, bool) or not isinstance(timeout, numbers.Real):
            raise InvalidConfigurationError(f"timeout must be a number of seconds, got {timeout!r}")
        if timeout <= 0:
            raise InvalidConfigurationError(f"timeout must be positive, got {timeout}")

        self.domain = domain
        self.scheme = scheme
        self.userAgent = userAgent
        self.timeout = float(timeout)
        self.proxies: Mapping[str, str] = MappingProxyType(self._validateProxies(proxies))
        self.api = f"{scheme}://{domain}{SEARCH_PATH}"
        self.reverseApi = f"{scheme}://{domain}{REVERSE_PATH}"

        for endpoint in (self.api, self.reverseApi):
            try:
                url = httpx.URL(endpoint)
            except (httpx.InvalidURL, ValueError) as e:
                raise InvalidConfigurationError(f"invalid endpoint URL {endpoint}: {e}") from e
            if not url.host:
                raise InvalidConfigurationError(f"invalid endpoint URL {endpoint}: empty host")

    @staticmethod
    def _validateProxies(proxies: Optional[Mapping[str, str]]) -> Dict[str, str]:
        """Check proxy mapping, so bad values fail on init instead of first request"""
        if proxies is None:
            return {}
        if not isinstance(proxies, abc.Mapping):
            raise InvalidConfigurationError(f"proxies must be a mapping, got {type(proxies).__name__}")

        result: Dict[str, str] = {}
        for scheme, proxyUrl in proxies.items():
            if not isinstance(scheme, str) or scheme.removesuffix("://") not in SUPPORTED_SCHEMES:
                raise InvalidConfigurationError(f"unsupported proxy scheme key {scheme!r}")
            if not isinstance(proxyUrl, str):
                raise InvalidConfigurationError(f"proxy URL for '{scheme}' must be a string")
            try:
                httpx.Proxy(proxyUrl)
            except (httpx.InvalidURL, ValueError) as e:
                raise InvalidConfigurationError(f"invalid proxy URL for '{scheme}': {e}") from e
            result[scheme] = proxyUrl
        return result

    @classmethod
    def fromConfig(cls, config: Dict[str, Any]) -> "NominatimGeocoder":
        """Create geocoder from loaded configuration, dood!

        Args:
            config: Full configuration dict (see geocoder.config.loadConfig),
                the [geocoder] section is used

        Returns:
            Configured NominatimGeocoder

        Raises:
            InvalidConfigurationError: If [geocoder] section or user-agent is missing
        """
        section = config.get("geocoder")
        if not isinstance(section, dict):
            raise InvalidConfigurationError("[geocoder] section not found in configuration")
        if "user-agent" not in section:
            raise InvalidConfigurationError("'user-agent' not set in [geocoder] section")

        return cls(
            section["user-agent"],
            domain=section.get("domain", DEFAULT_DOMAIN),
            scheme=section.get("scheme", DEFAULT_SCHEME),
            timeout=section.get("timeout", DEFAULT_TIMEOUT),
            proxies=section.get("proxies"),
        )

    def __repr__(self) -> str:
        return f"NominatimGeocoder(userAgent={self.userAgent!r}, api={self.api!r})"

    @overload
    def geocode(self, query: Mapping[str, str], exactlyOne: Literal[True] = ...) -> Location: ...

    @overload
    def geocode(self, query: Mapping[str, str], exactlyOne: Literal[False]) -> List[Location]: ...

    def geocode(self, query: Mapping[str, str], exactlyOne: bool = True) -> Union[Location, List[Location]]:
        """Forward geocoding: convert address to coordinates, dood!

        Args:
            query: Search parameters understood by Nominatim
                (e.g., {"postalcode": "90210", "country": "US"} or {"q": "Berlin"})
            exactlyOne: Return only the best match instead of the full list (default: True)

        Returns:
            Single Location if exactlyOne, otherwise list of locations in service order

        Raises:
            TransportError: Network error or timeout
            RequestFailedError: Non-200 HTTP status
            DecodeError: Body is not a JSON array of locations
            NoResultsError: Service found nothing
        """
        params: Dict[str, str] = dict(query)
        params["format"] = OUTPUT_FORMAT
        if exactlyOne:
            params["limit"] = "1"

        data = self._makeRequest(self._constructUrl(self.api, params))
        if not isinstance(data, list):
            raise DecodeError(f"expected JSON array from search, got {type(data).__name__}")

        locations = [Location.fromPayload(item) for item in data]
        if not locations:
            logger.info(f"No results found for {query}")
            raise NoResultsError()

        if exactlyOne:
            # limit=1 is not verified, extra results are dropped
            return locations[0]
        return locations

    def geocodeOne(self, query: Mapping[str, str]) -> Location:
        """Forward geocoding returning only the best match"""
        return self.geocode(query, exactlyOne=True)

    def geocodeMany(self, query: Mapping[str, str]) -> List[Location]:
        """Forward geocoding returning all matches"""
        return self.geocode(query, exactlyOne=False)

    def reverse(self, latitude: float, longitude: float, exactlyOne: bool = True) -> Location:
        """Reverse geocoding: convert coordinates to address, dood!

        Address details are always requested.

        Args:
            latitude: Latitude (-90 to 90)
            longitude: Longitude (-180 to 180)
            exactlyOne: Accepted for symmetry with geocode(), /reverse returns one object anyway

        Returns:
            Location with address components

        Raises:
            TransportError: Network error or timeout
            RequestFailedError: Non-200 HTTP status
            DecodeError: Body is not a JSON location object
            NoResultsError: Service reported that nothing is there
        """
        params = {
            "lat": "%f" % latitude,
            "lon": "%f" % longitude,
            "format": OUTPUT_FORMAT,
            "addressdetails": "1",
        }

        data = self._makeRequest(self._constructUrl(self.reverseApi, params))
        if isinstance(data, dict) and "error" in data:
            logger.info(f"No results found for ({latitude}, {longitude}): {data['error']}")
            raise NoResultsError(str(data["error"]))

        return Location.fromPayload(data)

    def _constructUrl(self, baseApi: str, params: Mapping[str, str]) -> str:
        """Build full request URL, keys are sorted for a stable result"""
        return baseApi + "?" + urlencode(sorted(params.items()))

    def _buildMounts(self) -> Optional[Dict[str, httpx.HTTPTransport]]:
        if not self.proxies:
            return None

        mounts: Dict[str, httpx.HTTPTransport] = {}
        for scheme, proxyUrl in self.proxies.items():
            pattern = scheme if scheme.endswith("://") else f"{scheme}://"
            mounts[pattern] = httpx.HTTPTransport(proxy=proxyUrl)
        return mounts

    def _makeRequest(self, url: str) -> Any:
        """Make HTTP GET request and return parsed JSON response, dood!

        Single point for all HTTP requests. Creates new session per request.

        Args:
            url: Full request URL

        Returns:
            Decoded JSON value

        Raises:
            TransportError: Timeout or network error
            RequestFailedError: Status other than 200
            DecodeError: Body is not valid JSON
        """
        headers = {USER_AGENT_HEADER: self.userAgent}
        logger.debug(f"Making request to {url}")

        try:
            with httpx.Client(
                timeout=self.timeout,
                mounts=self._buildMounts(),
                follow_redirects=True,
            ) as session:
                response = session.get(url, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout after {self.timeout}s: {url}")
            raise TransportError(f"request timed out: {e}", isTimeout=True, originalError=e) from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {e}")
            raise TransportError(f"network error: {e}", originalError=e) from e

        if response.status_code != 200:
            logger.warning(f"API request failed: {response.status_code}")
            raise RequestFailedError(response.status_code, response.text)

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise DecodeError(f"invalid JSON in response: {e}", originalError=e) from e

        logger.debug(f"API request successful: {response.status_code}")
        return data
