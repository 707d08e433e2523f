"""Serialization of typed request inputs into JSON bodies.

Stateless functions, one per request type. Fields left unset are omitted
from the body rather than sent as null, so the API keeps the light's
current value for them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from pylifxcloud.models import Breathe, Color, State, StateDelta, States, Toggle


__all__ = [
    "serialize_breathe",
    "serialize_color",
    "serialize_state",
    "serialize_state_delta",
    "serialize_states",
    "serialize_toggle",
]


def serialize_color(color: Color | str | None) -> str | None:
    """Render a color input, returning None when it is empty."""
    if color is None:
        return None
    rendered = str(color)
    return rendered or None


def _put(body: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        body[key] = value


def serialize_state(state: State) -> dict[str, Any]:
    """Serialize a State for PUT /lights/{selector}/state.

    Example:
        >>> serialize_state(State(power="on", brightness=0.5))
        {'power': 'on', 'brightness': 0.5}
    """
    body: dict[str, Any] = {}
    _put(body, "power", state.power)
    _put(body, "color", serialize_color(state.color))
    _put(body, "brightness", state.brightness)
    _put(body, "duration", state.duration)
    _put(body, "infrared", state.infrared)
    if state.fast:
        body["fast"] = True
    return body


def serialize_states(states: States) -> dict[str, Any]:
    """Serialize a batch update for PUT /lights/states.

    Each entry carries its own selector next to its state fields.
    """
    body: dict[str, Any] = {}
    entries = [{**serialize_state(entry.state), "selector": entry.selector} for entry in states.states]
    if entries:
        body["states"] = entries
    defaults = serialize_state(states.defaults)
    if defaults:
        body["defaults"] = defaults
    return body


def serialize_state_delta(delta: StateDelta) -> dict[str, Any]:
    """Serialize a StateDelta for POST /lights/{selector}/state/delta.

    Explicit zeros are kept; only None is omitted.
    """
    body: dict[str, Any] = {}
    for key in ("power", "duration", "infrared", "hue", "saturation", "brightness", "kelvin"):
        _put(body, key, getattr(delta, key))
    return body


def serialize_toggle(toggle: Toggle) -> dict[str, Any]:
    """Serialize a Toggle for POST /lights/{selector}/toggle."""
    body: dict[str, Any] = {}
    _put(body, "duration", toggle.duration)
    return body


def serialize_breathe(breathe: Breathe) -> dict[str, Any]:
    """Serialize a Breathe effect for POST /lights/{selector}/effects/breathe.

    Boolean flags are always sent, so power_on=False is not mistaken for the
    API default of True.
    """
    body: dict[str, Any] = {}
    _put(body, "color", serialize_color(breathe.color))
    _put(body, "from_color", serialize_color(breathe.from_color))
    body["period"] = breathe.period
    body["cycles"] = breathe.cycles
    body["persist"] = breathe.persist
    body["power_on"] = breathe.power_on
    body["peak"] = breathe.peak
    return body
