"""
Pytest configuration and common fixtures for geocoder tests.

All fixtures follow camelCase naming convention.
"""

from typing import Any, Generator
from unittest.mock import MagicMock, patch

import httpx
import pytest

# ============================================================================
# HTTP Fixtures
# ============================================================================


class MockNominatim:
    """Stand-in for the Nominatim service, patched over httpx.Client.

    Every request made by the geocoder gets the configured response and its
    URL is recorded in requestedUrls.
    """

    def __init__(self, mockClient: MagicMock):
        self.mockClient = mockClient
        self.requestedUrls: list[str] = []
        self._response = httpx.Response(200, json=[])
        self.session.get.side_effect = self._handleGet

    @property
    def session(self) -> MagicMock:
        return self.mockClient.return_value.__enter__.return_value

    def respondWith(self, data: Any, statusCode: int = 200) -> None:
        """Answer next requests with JSON data"""
        self._response = httpx.Response(statusCode, json=data)

    def respondWithText(self, text: str, statusCode: int = 200) -> None:
        """Answer next requests with raw text body"""
        self._response = httpx.Response(statusCode, text=text)

    def _handleGet(self, url: str, **kwargs: Any) -> httpx.Response:
        self.requestedUrls.append(url)
        return self._response


@pytest.fixture
def mockNominatim() -> Generator[MockNominatim, None, None]:
    """
    Patch httpx.Client so no real requests are made.

    Example:
        def testSearch(mockNominatim):
            mockNominatim.respondWith([{"display_name": "X", "lat": "1", "lon": "2"}])
            # Test code here
    """
    with patch("httpx.Client") as mockClient:
        yield MockNominatim(mockClient)
