"""Shared fixtures: fake icon directory, client and registry wired to it."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from iconify_mcp.foundation.config import clear_settings_cache
from iconify_mcp.foundation.registry import HandlerRegistry
from iconify_mcp.foundation.testing import MockIconifyAPI
from iconify_mcp.handlers import build_registry
from iconify_mcp.upstream import IconifyClient


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def api() -> MockIconifyAPI:
    return MockIconifyAPI()


@pytest_asyncio.fixture
async def client(api: MockIconifyAPI) -> AsyncIterator[IconifyClient]:
    async with api.client() as c:
        yield c


@pytest.fixture
def registry(client: IconifyClient) -> HandlerRegistry:
    return build_registry(client)
