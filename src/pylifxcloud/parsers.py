"""Parsing utilities for LIFX cloud API responses.

This module converts decoded JSON bodies into the frozen models. Shape
mismatches are reported as LifxDecodeError so callers can tell them apart
from errors reported by the API itself.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pylifxcloud.exceptions import LifxDecodeError
from pylifxcloud.models import (
    Capabilities,
    ErrorDetail,
    ErrorEnvelope,
    HSBKColor,
    LifxResponse,
    Light,
    Product,
    Result,
    Selector,
    Status,
)


__all__ = [
    "parse_error_envelope",
    "parse_light",
    "parse_lights",
    "parse_response",
]


def _expect_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"Expected JSON object for {what}, got {type(data).__name__}"
        raise LifxDecodeError(msg)
    return data


def _expect_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        msg = f"Expected JSON array for {what}, got {type(data).__name__}"
        raise LifxDecodeError(msg)
    return data


def _expect_str(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        msg = f"Expected string for '{key}', got {type(value).__name__}"
        raise LifxDecodeError(msg)
    return value


def _expect_number(data: dict[str, Any], key: str, default: float | None = 0.0) -> Any:
    # JSON integers are accepted wherever a float is expected, booleans are not
    value = data.get(key, default)
    if value is None and default is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Expected number for '{key}', got {type(value).__name__}"
        raise LifxDecodeError(msg)
    return value


def _expect_bool(data: dict[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        msg = f"Expected boolean for '{key}', got {type(value).__name__}"
        raise LifxDecodeError(msg)
    return value


def _parse_selector(data: Any) -> Selector:
    data = _expect_dict(data or {}, "selector")
    return Selector(id=_expect_str(data, "id"), name=_expect_str(data, "name"))


def _parse_capabilities(data: Any) -> Capabilities:
    data = _expect_dict(data or {}, "capabilities")
    return Capabilities(
        has_color=_expect_bool(data, "has_color"),
        has_variable_color_temp=_expect_bool(data, "has_variable_color_temp"),
        has_ir=_expect_bool(data, "has_ir"),
        has_chain=_expect_bool(data, "has_chain"),
        has_multizone=_expect_bool(data, "has_multizone"),
        min_kelvin=_expect_number(data, "min_kelvin"),
        max_kelvin=_expect_number(data, "max_kelvin"),
    )


def _parse_product(data: Any) -> Product:
    data = _expect_dict(data or {}, "product")
    return Product(
        name=_expect_str(data, "name"),
        identifier=_expect_str(data, "identifier"),
        company=_expect_str(data, "company"),
        capabilities=_parse_capabilities(data.get("capabilities")),
    )


def _parse_color(data: Any) -> HSBKColor:
    data = _expect_dict(data or {}, "color")
    return HSBKColor(
        hue=_expect_number(data, "hue"),
        saturation=_expect_number(data, "saturation"),
        kelvin=int(_expect_number(data, "kelvin", 0)),
        brightness=_expect_number(data, "brightness", None),
    )


def _parse_timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as err:
        msg = f"Invalid last_seen timestamp: {value!r}"
        raise LifxDecodeError(msg) from err


def _parse_status(value: Any) -> Status | None:
    # Unknown statuses are kept as None rather than failing the whole call
    try:
        return Status(value)
    except ValueError:
        return None


def parse_light(data: Any) -> Light:
    """Parse one light from a list response.

    The API reports recency as ``seconds_since_seen``; older payloads used
    ``seconds_last_seen``. Both are accepted.

    Args:
        data: One element of the GET /lights/{selector} array.

    Returns:
        Light instance.

    Raises:
        LifxDecodeError: If the element is not an object, lacks an id, or a
            field has the wrong JSON type.
    """
    data = _expect_dict(data, "light")
    if "id" not in data:
        msg = "Light is missing required field 'id'"
        raise LifxDecodeError(msg)

    return Light(
        id=_expect_str(data, "id"),
        uuid=_expect_str(data, "uuid"),
        label=_expect_str(data, "label"),
        connected=_expect_bool(data, "connected"),
        power=_expect_str(data, "power"),
        color=_parse_color(data.get("color")),
        brightness=_expect_number(data, "brightness"),
        effect=_expect_str(data, "effect"),
        group=_parse_selector(data.get("group")),
        location=_parse_selector(data.get("location")),
        product=_parse_product(data.get("product")),
        last_seen=_parse_timestamp(data.get("last_seen")),
        seconds_last_seen=_expect_number(
            data, "seconds_since_seen" if "seconds_since_seen" in data else "seconds_last_seen"
        ),
    )


def parse_lights(data: Any) -> list[Light]:
    """Parse the array returned by GET /lights/{selector}.

    An empty array is a valid response and yields an empty list.
    """
    return [parse_light(item) for item in _expect_list(data, "light list")]


def _parse_result(data: Any) -> Result:
    data = _expect_dict(data, "result")
    nested = data.get("results")
    return Result(
        id=_expect_str(data, "id"),
        label=_expect_str(data, "label"),
        status=_parse_status(data.get("status")),
        operation=data.get("operation"),
        results=tuple(_parse_result(item) for item in _expect_list(nested, "results")) if nested is not None else (),
    )


def parse_response(data: Any) -> LifxResponse:
    """Parse the body of a mutating call.

    Handles both the flat form (``{"results": [{"id", "label", "status"}]}``)
    and the batch form used by PUT /lights/states, where each entry carries
    the echoed ``operation`` and its own nested ``results``.

    Raises:
        LifxDecodeError: If the body is not an object with a results array.
    """
    data = _expect_dict(data, "response")
    results = _expect_list(data.get("results", []), "results")
    return LifxResponse(results=tuple(_parse_result(item) for item in results))


def parse_error_envelope(data: Any) -> ErrorEnvelope:
    """Parse the error body returned with a failure status.

    Example:
        >>> parse_error_envelope({"error": "Validation error",
        ...                       "errors": [{"field": "color", "message": ["Unable to parse color"]}]})
        ErrorEnvelope(error='Validation error', errors=(ErrorDetail(field='color', ...),), warnings=())

    Raises:
        LifxDecodeError: If the body is not an error object.
    """
    data = _expect_dict(data, "error")
    if "error" not in data and "errors" not in data:
        msg = "Body is not an error envelope"
        raise LifxDecodeError(msg)

    details = []
    for item in _expect_list(data.get("errors", []), "errors"):
        detail = _expect_dict(item, "error detail")
        message = detail.get("message", [])
        if isinstance(message, str):
            message = [message]
        details.append(ErrorDetail(field=detail.get("field", ""), message=tuple(message)))

    return ErrorEnvelope(
        error=data.get("error", ""),
        errors=tuple(details),
        warnings=tuple(_expect_list(data.get("warnings", []), "warnings")),
    )
