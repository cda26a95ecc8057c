"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport

from doclient import Client
from doclient.core.config import get_file_config, get_settings

TEST_BASE_URL = "http://test/"
TEST_TOKEN = "test-token"


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Settings are cached process-wide; reset them around every test."""
    get_settings.cache_clear()
    get_file_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_file_config.cache_clear()


@pytest.fixture
def mux() -> FastAPI:
    """Fake API server; tests register the endpoints they exercise."""
    return FastAPI()


@pytest_asyncio.fixture(scope="function")
async def client(mux: FastAPI) -> AsyncGenerator[Client, None]:
    """Create API client wired to the fake server."""
    async with Client(
        token=TEST_TOKEN,
        base_url=TEST_BASE_URL,
        transport=ASGITransport(app=mux),
    ) as c:
        yield c
