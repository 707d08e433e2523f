"""Low-level transport for the LIFX cloud HTTP API.

This module owns the aiohttp session and attaches credentials. It hands the
raw response back to the caller and never interprets status codes.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession


if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from types import TracebackType

    from aiohttp import ClientResponse

    from pylifxcloud.config import LifxConfig

_LOGGER = logging.getLogger(__name__)


class LifxAPI:
    """Transport adapter for the LIFX cloud API.

    Example:
        ```python
        from pylifxcloud.api import LifxAPI
        from pylifxcloud.config import LifxConfig

        async with LifxAPI(LifxConfig(token="c8e1...")) as api:
            async with api.request("GET", "/lights/all") as response:
                print(response.status, await response.json())
        ```

    Attributes:
        config: Immutable transport configuration (token, base URL, timeout).
    """

    def __init__(self, config: LifxConfig, *, session: ClientSession | None = None) -> None:
        """Initialize the transport.

        Args:
            config: Transport configuration.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager and closed on exit.
        """
        self.config = config
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> LifxAPI:
        """Enter the context manager, creating a session if none was injected."""
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if this instance created it."""
        await self.close()

    async def close(self) -> None:
        """Close the session if it is owned by this transport."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    @asynccontextmanager
    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        json_data: dict[str, Any] | None = None,
    ) -> AsyncIterator[ClientResponse]:
        """Send an authenticated request and yield the response.

        The response is released when the ``async with`` block exits, whether
        the body was read or not.

        Args:
            method: HTTP method (GET, PUT, POST).
            endpoint: API endpoint path (e.g., "/lights/all/state").
            json_data: Optional JSON body.

        Yields:
            The aiohttp response. Its status code is not checked here.

        Raises:
            RuntimeError: If session is not initialized or is closed.
            TimeoutError: If request times out.
            ClientError: If connection fails.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        url = self.config.url(endpoint)
        _LOGGER.debug("%s %s %s", method, url, json_data)

        try:
            async with self._session.request(
                method,
                url,
                json=json_data,
                headers=self.config.headers,
                timeout=self.config.client_timeout,
            ) as response:
                _LOGGER.debug("%s %s -> HTTP %d", method, url, response.status)
                yield response

        except TimeoutError:
            _LOGGER.exception("Request to %s timed out", url)
            raise

        except ClientError:
            _LOGGER.exception("Connection error for %s", url)
            raise
