"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture
def light_payload() -> dict[str, Any]:
    """Return a full light object as listed by GET /lights/{selector}."""
    return {
        "id": "d073d5000001",
        "uuid": "02e1c3a4-54c2-4b1b-9e3f-9a3b2d6c7e11",
        "label": "Desk",
        "connected": True,
        "power": "on",
        "color": {"hue": 120.0, "saturation": 1.0, "kelvin": 3500},
        "brightness": 0.75,
        "effect": "OFF",
        "group": {"id": "1c8de82b81f445e7cfaafae49b259c71", "name": "Office"},
        "location": {"id": "1d6fe8ef0fde4c6d77b0012dc736662c", "name": "Home"},
        "product": {
            "name": "LIFX A19",
            "identifier": "lifx_a19",
            "company": "LIFX",
            "capabilities": {
                "has_color": True,
                "has_variable_color_temp": True,
                "has_ir": False,
                "has_chain": False,
                "has_multizone": False,
                "min_kelvin": 2500,
                "max_kelvin": 9000,
            },
        },
        "last_seen": "2024-05-01T08:53:02.867+00:00",
        "seconds_since_seen": 2.5,
    }


@pytest.fixture
async def mock_session() -> AsyncGenerator[ClientSession]:
    """Create a mock aiohttp ClientSession.

    ``request`` is a plain MagicMock so tests can make it raise on call.

    Yields:
        Mock ClientSession for testing.
    """
    session = AsyncMock(spec=ClientSession)
    session.closed = False
    session.request = MagicMock()

    async def mock_close() -> None:
        session.closed = True

    session.close = mock_close

    yield session

    if not session.closed:
        await session.close()
