"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from pylifxcloud import AuthenticationError, LifxClient, LifxConfig


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> LifxConfig:
    """Load integration test configuration from environment.

    Skips the test when no token is configured.
    """
    try:
        return LifxConfig.from_env()
    except AuthenticationError:
        pytest.skip("LIFX_TOKEN not set; create a .env file to run integration tests")


@pytest.fixture(scope="session")
def test_selector() -> str:
    """Get the selector of the lights the tests may change."""
    return os.getenv("LIFX_TEST_SELECTOR", "all")


@pytest.fixture
async def client(integration_config: LifxConfig) -> AsyncGenerator[LifxClient]:
    """Create a client with its own session."""
    async with LifxClient(config=integration_config) as client:
        yield client


@pytest.fixture(autouse=True)
async def rate_limit_delay(request: pytest.FixtureRequest) -> AsyncGenerator[None]:
    """Add delay between integration tests to stay under the API rate limit."""
    yield
    if "integration" in request.keywords:
        await asyncio.sleep(1.0)
