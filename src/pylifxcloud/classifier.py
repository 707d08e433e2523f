"""Classification of HTTP outcomes and mapping of failures to exceptions."""

from __future__ import annotations

import json
import logging
import math
import time
from http import HTTPStatus
from typing import TYPE_CHECKING

from pylifxcloud.const import HEADER_RATE_LIMIT_RESET, HEADER_RETRY_AFTER
from pylifxcloud.exceptions import AuthenticationError, LifxAPIError, LifxDecodeError, RateLimitError
from pylifxcloud.parsers import parse_error_envelope


if TYPE_CHECKING:
    from collections.abc import Mapping

    from aiohttp import ClientResponse

    from pylifxcloud.models import ErrorEnvelope

_LOGGER = logging.getLogger(__name__)


def is_error(status: int) -> bool:
    """Check whether a mutating endpoint's status signals failure.

    Anything outside 2xx is an error. 202 (fast mode) and 207 (some
    lights failed) are successes.
    """
    return not HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES


def is_list_error(status: int) -> bool:
    """Check whether the list endpoint's status signals failure (3xx and above)."""
    return status >= HTTPStatus.MULTIPLE_CHOICES


def _header_number(headers: Mapping[str, str], header: str) -> float | None:
    value = headers.get(header)
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        number = math.nan
    if not math.isfinite(number):
        _LOGGER.debug("Ignoring unparsable %s header: %r", header, value)
        return None
    return number


def _retry_after(headers: Mapping[str, str]) -> int | None:
    # Retry-After is a delay in seconds, X-RateLimit-Reset a Unix timestamp
    delay = _header_number(headers, HEADER_RETRY_AFTER)
    if delay is not None:
        return max(0, int(delay))
    reset_at = _header_number(headers, HEADER_RATE_LIMIT_RESET)
    if reset_at is not None:
        return max(0, int(reset_at) - int(time.time()))
    return None


def build_lifx_error(status: int, body: str, headers: Mapping[str, str] | None = None) -> LifxAPIError:
    """Build the exception for a failed call from its status and raw body.

    The body is decoded as a vendor error envelope. When that fails the
    exception still carries the raw status and body.

    Args:
        status: HTTP status code.
        body: Raw response body text.
        headers: Response headers, used for rate limit hints.

    Returns:
        LifxAPIError, or AuthenticationError for 401/403 and RateLimitError for 429.
    """
    envelope: ErrorEnvelope | None = None
    try:
        envelope = parse_error_envelope(json.loads(body))
    except (ValueError, LifxDecodeError):
        _LOGGER.debug("Error body for HTTP %d is not an error envelope", status)

    if envelope is not None and envelope.error:
        msg = f"HTTP {status}: {envelope.error}"
    elif body:
        msg = f"HTTP {status}: {body}"
    else:
        msg = f"HTTP {status}"

    if status in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        return AuthenticationError(msg, status=status, envelope=envelope, body=body)

    if status == HTTPStatus.TOO_MANY_REQUESTS:
        return RateLimitError(
            msg,
            status=status,
            envelope=envelope,
            body=body,
            retry_after=_retry_after(headers or {}),
        )

    return LifxAPIError(msg, status=status, envelope=envelope, body=body)


async def get_lifx_error(response: ClientResponse) -> LifxAPIError:
    """Read a failed response and build its exception.

    Args:
        response: aiohttp response with a failure status.

    Returns:
        Exception describing the failure, ready to be raised.
    """
    body = (await response.read()).decode("utf-8", errors="replace")
    error = build_lifx_error(response.status, body, response.headers)
    _LOGGER.warning("LIFX API request to %s failed: %s", response.url, error)
    return error
