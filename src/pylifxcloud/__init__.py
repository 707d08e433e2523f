"""Python client library for the LIFX cloud HTTP API.

This package provides an async client for listing LIFX lights and changing
their state (power, color, brightness, infrared, breathe effect) through
https://api.lifx.com.

The library is organized into three layers:
1. **Transport** (pylifxcloud.api): aiohttp session, credentials, raw responses
2. **Classification** (pylifxcloud.classifier): status policy and error mapping
3. **Client** (pylifxcloud.client): one method per API operation, typed results

Example:
    Basic usage:

    ```python
    from pylifxcloud import Breathe, LifxClient, State

    async with LifxClient(token="c8e1...") as client:
        for light in await client.list_lights("all"):
            print(light.label, light.power, light.brightness)

        await client.set_state("label:Desk", State(power="on", color="blue", brightness=0.8))
        await client.breathe("all", Breathe(color="red", cycles=3))
        await client.fast_power_off("group:Kitchen")
    ```
"""

from __future__ import annotations

from pylifxcloud.api import LifxAPI
from pylifxcloud.classifier import get_lifx_error, is_error, is_list_error
from pylifxcloud.client import LifxClient
from pylifxcloud.config import LifxConfig
from pylifxcloud.exceptions import (
    AuthenticationError,
    InvalidParameterError,
    LifxAPIError,
    LifxDecodeError,
    LifxError,
    RateLimitError,
)
from pylifxcloud.models import (
    Breathe,
    Capabilities,
    Color,
    ErrorDetail,
    ErrorEnvelope,
    HSBKColor,
    LifxResponse,
    Light,
    Product,
    Result,
    Selector,
    State,
    StateDelta,
    States,
    StateWithSelector,
    Status,
    Toggle,
)


__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "Breathe",
    "Capabilities",
    "Color",
    "ErrorDetail",
    "ErrorEnvelope",
    "HSBKColor",
    "InvalidParameterError",
    "LifxAPI",
    "LifxAPIError",
    "LifxClient",
    "LifxConfig",
    "LifxDecodeError",
    "LifxError",
    "LifxResponse",
    "Light",
    "Product",
    "RateLimitError",
    "Result",
    "Selector",
    "State",
    "StateDelta",
    "StateWithSelector",
    "States",
    "Status",
    "Toggle",
    "__version__",
    "get_lifx_error",
    "is_error",
    "is_list_error",
]
