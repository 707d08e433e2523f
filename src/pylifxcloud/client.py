"""High-level client for the LIFX cloud API.

Every operation follows the same path: serialize the input, send it through
the transport, classify the status, then decode the body into a model.
The per-endpoint differences (status predicate and fast-mode short-circuit)
are passed to a single helper as configuration.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeVar, cast

from pylifxcloud.api import LifxAPI
from pylifxcloud.classifier import get_lifx_error, is_error, is_list_error
from pylifxcloud.config import LifxConfig
from pylifxcloud.const import (
    DEFAULT_SELECTOR,
    ENDPOINT_BREATHE,
    ENDPOINT_LIST_LIGHTS,
    ENDPOINT_SET_STATE,
    ENDPOINT_SET_STATES,
    ENDPOINT_STATE_DELTA,
    ENDPOINT_TOGGLE,
    POWER_OFF,
    POWER_ON,
)
from pylifxcloud.exceptions import LifxDecodeError
from pylifxcloud.models import State, Toggle
from pylifxcloud.parsers import parse_lights, parse_response
from pylifxcloud.serializers import (
    serialize_breathe,
    serialize_state,
    serialize_state_delta,
    serialize_states,
    serialize_toggle,
)


if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from aiohttp import ClientSession

    from pylifxcloud.models import Breathe, LifxResponse, Light, StateDelta, States

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class LifxClient:
    """Client for listing and controlling lights through the LIFX cloud.

    No state is kept between calls apart from the transport configuration,
    so a single client may be shared by concurrent tasks.

    Example:
        ```python
        from pylifxcloud import Breathe, LifxClient, State

        async with LifxClient(token="c8e1...") as client:
            lights = await client.list_lights("all")
            await client.set_state("label:Desk", State(power="on", color="blue", duration=2))
            await client.breathe("group:Kitchen", Breathe(color="red", cycles=3))
        ```

    Attributes:
        api: Low-level LifxAPI transport.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: LifxConfig | None = None,
        session: ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Personal access token. Ignored when config is given.
            config: Pre-built transport configuration.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.

        Raises:
            ValueError: If neither token nor config is provided.
        """
        if config is None:
            if not token:
                msg = "Either token or config must be provided"
                raise ValueError(msg)
            config = LifxConfig(token=token)

        self._api = LifxAPI(config, session=session)

    @property
    def api(self) -> LifxAPI:
        """Get the underlying transport."""
        return self._api

    async def __aenter__(self) -> LifxClient:
        """Enter the context manager."""
        await self._api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing an owned session."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    async def _execute(
        self,
        method: str,
        endpoint: str,
        parser: Callable[[Any], _T],
        *,
        json_data: dict[str, Any] | None = None,
        failed: Callable[[int], bool] = is_error,
        fast: bool = False,
    ) -> _T | None:
        """Send a request and decode its body.

        Args:
            method: HTTP method.
            endpoint: Endpoint path with the selector already filled in.
            parser: Converts the decoded JSON into the result model.
            json_data: Optional request body.
            failed: Predicate on the status code marking the call as failed.
            fast: The request asked for fast mode; a 202 reply then has no
                body and None is returned.

        Returns:
            Parsed result, or None for an accepted fast-mode request.

        Raises:
            LifxAPIError: If the API reported an error.
            LifxDecodeError: If the success body does not match the expected shape.
        """
        async with self._api.request(method, endpoint, json_data=json_data) as response:
            if failed(response.status):
                raise await get_lifx_error(response)

            if fast and response.status == HTTPStatus.ACCEPTED:
                return None

            try:
                data = await response.json(content_type=None)
            except ValueError as err:
                msg = f"Invalid JSON in response from {endpoint}: {err}"
                raise LifxDecodeError(msg) from err

        return parser(data)

    async def _fetch(
        self,
        method: str,
        endpoint: str,
        parser: Callable[[Any], _T],
        *,
        json_data: dict[str, Any] | None = None,
        failed: Callable[[int], bool] = is_error,
    ) -> _T:
        """Send a request that always has a result body (no fast mode)."""
        result = await self._execute(method, endpoint, parser, json_data=json_data, failed=failed)
        return cast("_T", result)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    async def set_state(self, selector: str, state: State) -> LifxResponse | None:
        """Apply a state to every light matching the selector.

        Args:
            selector: Lights to change (e.g. "all", "id:d073d5000000", "label:Desk").
            state: Desired state.

        Returns:
            Per-light results, or None when ``state.fast`` is set and the API
            accepted the request without reporting results.
        """
        return await self._execute(
            "PUT",
            ENDPOINT_SET_STATE.format(selector=selector),
            parse_response,
            json_data=serialize_state(state),
            fast=state.fast,
        )

    async def fast_set_state(self, selector: str, state: State) -> LifxResponse | None:
        """Apply a state in fast mode.

        Errors raised before the API accepts the request are still raised.
        """
        return await self.set_state(selector, replace(state, fast=True))

    async def set_states(self, states: States) -> LifxResponse:
        """Apply several selector-scoped states in one call.

        Args:
            states: Entries to apply, plus defaults shared by every entry.

        Returns:
            One result per entry, each with the echoed operation and its
            per-light results.
        """
        return await self._fetch(
            "PUT",
            ENDPOINT_SET_STATES,
            parse_response,
            json_data=serialize_states(states),
        )

    async def state_delta(self, selector: str, delta: StateDelta) -> LifxResponse:
        """Change the current state by relative amounts."""
        return await self._fetch(
            "POST",
            ENDPOINT_STATE_DELTA.format(selector=selector),
            parse_response,
            json_data=serialize_state_delta(delta),
        )

    async def toggle(self, selector: str, duration: float | None = None) -> LifxResponse:
        """Turn off lights that are on and turn on lights that are off.

        Args:
            selector: Lights to toggle.
            duration: Optional transition time in seconds.
        """
        return await self._fetch(
            "POST",
            ENDPOINT_TOGGLE.format(selector=selector),
            parse_response,
            json_data=serialize_toggle(Toggle(duration=duration)),
        )

    async def list_lights(self, selector: str = DEFAULT_SELECTOR) -> list[Light]:
        """List lights matching the selector."""
        return await self._fetch(
            "GET",
            ENDPOINT_LIST_LIGHTS.format(selector=selector),
            parse_lights,
            failed=is_list_error,
        )

    # -------------------------------------------------------------------------
    # Power
    # -------------------------------------------------------------------------

    async def power_on(self, selector: str) -> LifxResponse | None:
        """Turn on every light matching the selector."""
        return await self.set_state(selector, State(power=POWER_ON))

    async def power_off(self, selector: str) -> LifxResponse | None:
        """Turn off every light matching the selector."""
        return await self.set_state(selector, State(power=POWER_OFF))

    async def fast_power_on(self, selector: str) -> None:
        """Turn lights on in fast mode, discarding the result and any error."""
        await self._fire_and_forget(selector, State(power=POWER_ON, fast=True))

    async def fast_power_off(self, selector: str) -> None:
        """Turn lights off in fast mode, discarding the result and any error."""
        await self._fire_and_forget(selector, State(power=POWER_OFF, fast=True))

    async def _fire_and_forget(self, selector: str, state: State) -> None:
        try:
            await self.set_state(selector, state)
        except Exception:  # noqa: BLE001
            _LOGGER.debug("Discarded error from fast power change on %s", selector, exc_info=True)

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------

    async def breathe(self, selector: str, breathe: Breathe) -> LifxResponse:
        """Start a breathe effect on every light matching the selector.

        Raises:
            InvalidParameterError: If the effect is invalid. Nothing is sent.
        """
        breathe.validate()
        return await self._fetch(
            "POST",
            ENDPOINT_BREATHE.format(selector=selector),
            parse_response,
            json_data=serialize_breathe(breathe),
        )
