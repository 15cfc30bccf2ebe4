"""Testing utilities: a simulated icon directory on httpx.MockTransport."""

from .mock_api import MockIconifyAPI, MockResponse

__all__ = ["MockIconifyAPI", "MockResponse"]
