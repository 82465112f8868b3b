"""
Nominatim Geocoder Exceptions

This module contains the exception hierarchy for the geocoding client.
Every failure kind is a separate class, so callers can branch on it
without looking at message text.
"""

import logging
from typing import Optional

from .constants import RETRYABLE_STATUS_CODES

logger = logging.getLogger(__name__)


class GeocoderError(Exception):
    """Base exception class for all geocoder errors, dood!

    Attributes:
        message: Human-readable error message
        retryable: Whether repeating the same call later may succeed
    """

    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        logger.debug(f"{type(self).__name__}: {message}")

    def __str__(self) -> str:
        return self.message


class InvalidConfigurationError(GeocoderError):
    """Raised when the client is misconfigured.

    This occurs when:
    - The user agent is empty or one of the rejected placeholder values
    - The scheme is not http/https
    - The configuration file is missing or malformed
    """


class TransportError(GeocoderError):
    """Raised when the request could not complete on the network level.

    This includes DNS failures, refused connections and timeouts.
    The client never retries by itself.

    Attributes:
        isTimeout: True when the configured timeout elapsed
        originalError: The httpx exception that caused this error
    """

    retryable = True

    def __init__(self, message: str, isTimeout: bool = False, originalError: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.isTimeout = isTimeout
        self.originalError = originalError


class RequestFailedError(GeocoderError):
    """Raised when the service answers with a non-success HTTP status.

    Attributes:
        statusCode: HTTP status code
        responseText: Response body (if available)
    """

    def __init__(self, statusCode: int, responseText: Optional[str] = None) -> None:
        super().__init__(f"geocoding API request failed with status {statusCode}")
        self.statusCode = statusCode
        self.responseText = responseText

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.statusCode in RETRYABLE_STATUS_CODES


class DecodeError(GeocoderError):
    """Raised when the response body is not JSON or has an unexpected shape.

    Attributes:
        originalError: Underlying parse error (if any)
    """

    def __init__(self, message: str, originalError: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.originalError = originalError


class NoResultsError(GeocoderError):
    """Raised when the service answered correctly but found nothing.

    Not a fault: callers should treat it as "not found".
    """

    def __init__(self, message: str = "no results found") -> None:
        super().__init__(message)
