"""Data models for LIFX cloud API requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003 - Used at runtime in dataclass fields
from enum import Enum

from pylifxcloud.const import (
    BREATHE_PEAK_MAX,
    BREATHE_PEAK_MIN,
    DEFAULT_BREATHE_CYCLES,
    DEFAULT_BREATHE_PEAK,
    DEFAULT_BREATHE_PERIOD,
    DEFAULT_BREATHE_PERSIST,
    DEFAULT_BREATHE_POWER_ON,
    POWER_ON,
)
from pylifxcloud.exceptions import InvalidParameterError


__all__ = [
    "Breathe",
    "Capabilities",
    "Color",
    "ErrorDetail",
    "ErrorEnvelope",
    "HSBKColor",
    "LifxResponse",
    "Light",
    "Product",
    "Result",
    "Selector",
    "State",
    "StateDelta",
    "StateWithSelector",
    "States",
    "Status",
    "Toggle",
]


class Status(str, Enum):
    """Per-light outcome of a mutating call."""

    OK = "ok"
    TIMED_OUT = "timed_out"
    OFFLINE = "offline"


# -----------------------------------------------------------------------------
# Decoded results
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Selector:
    """Identity of a light, group or location.

    Attributes:
        id: Opaque identifier.
        name: Human-readable name.
    """

    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class Capabilities:
    """Static product feature flags.

    Attributes:
        has_color: Whether the product can display colors.
        has_variable_color_temp: Whether the white temperature can be changed.
        has_ir: Whether the product has infrared LEDs.
        has_chain: Whether the product supports chained devices (e.g. Tile).
        has_multizone: Whether the product has individually addressable zones.
        min_kelvin: Lowest supported color temperature.
        max_kelvin: Highest supported color temperature.
    """

    has_color: bool = False
    has_variable_color_temp: bool = False
    has_ir: bool = False
    has_chain: bool = False
    has_multizone: bool = False
    min_kelvin: float = 0.0
    max_kelvin: float = 0.0


@dataclass(frozen=True)
class Product:
    """Product information reported for a light."""

    name: str = ""
    identifier: str = ""
    company: str = ""
    capabilities: Capabilities = field(default_factory=Capabilities)


@dataclass(frozen=True)
class HSBKColor:
    """Color reported by a light.

    Brightness is normally reported on the light itself, so it is optional here.
    """

    hue: float = 0.0
    saturation: float = 0.0
    kelvin: int = 0
    brightness: float | None = None


@dataclass(frozen=True)
class Light:
    """Snapshot of a light's reported state.

    Attributes:
        id: Serial number of the light.
        uuid: Unique identifier assigned by the cloud.
        label: User-assigned name.
        connected: Whether the cloud can currently reach the light.
        power: "on" or "off".
        color: Current color.
        brightness: Current brightness (0.0-1.0).
        effect: Name of the running effect, if any.
        group: Group the light belongs to.
        location: Location the light belongs to.
        product: Product details and capabilities.
        last_seen: When the cloud last heard from the light.
        seconds_last_seen: Seconds since last_seen.
    """

    id: str
    uuid: str = ""
    label: str = ""
    connected: bool = False
    power: str = ""
    color: HSBKColor = field(default_factory=HSBKColor)
    brightness: float = 0.0
    effect: str = ""
    group: Selector = field(default_factory=Selector)
    location: Selector = field(default_factory=Selector)
    product: Product = field(default_factory=Product)
    last_seen: datetime | None = None
    seconds_last_seen: float = 0.0

    @property
    def is_on(self) -> bool:
        """Check if light is powered on."""
        return self.power == POWER_ON


@dataclass(frozen=True)
class Result:
    """Outcome for one light (or one operation of a batch call).

    Attributes:
        id: Light identifier.
        label: Light label.
        status: Outcome of the change on this light.
        operation: Echo of the requested operation (batch calls only).
        results: Nested per-light results (batch calls only).
    """

    id: str = ""
    label: str = ""
    status: Status | None = None
    operation: dict[str, object] | None = None
    results: tuple[Result, ...] = ()


@dataclass(frozen=True)
class LifxResponse:
    """Decoded body of a mutating call."""

    results: tuple[Result, ...] = ()

    @property
    def all_ok(self) -> bool:
        """Check that every light reported ``ok``."""

        def _ok(result: Result) -> bool:
            if result.results:
                return all(_ok(nested) for nested in result.results)
            return result.status is Status.OK

        return all(_ok(result) for result in self.results)


@dataclass(frozen=True)
class ErrorDetail:
    """Validation failure reported for a single request field."""

    field: str = ""
    message: tuple[str, ...] = ()


@dataclass(frozen=True)
class ErrorEnvelope:
    """Error body returned by the API on failure."""

    error: str = ""
    errors: tuple[ErrorDetail, ...] = ()
    warnings: tuple[dict[str, object], ...] = ()


# -----------------------------------------------------------------------------
# Request inputs
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """Color expression accepted by the API.

    A color may be a raw expression (a name such as "red", "#ff0000",
    "rgb:255,0,0" or "kelvin:2700") and/or partial HSBK components.
    Components left as None are not sent, so the light keeps its current value.

    Example:
        >>> str(Color(hue=120, saturation=1.0))
        'hue:120 saturation:1.0'
        >>> str(Color("white", kelvin=2700))
        'white kelvin:2700'
    """

    name: str | None = None
    hue: float | None = None
    saturation: float | None = None
    brightness: float | None = None
    kelvin: int | None = None

    @classmethod
    def from_hsbk(cls, color: HSBKColor) -> Color:
        """Build an input color from a color reported by a light."""
        return cls(
            hue=color.hue,
            saturation=color.saturation,
            brightness=color.brightness,
            kelvin=color.kelvin or None,
        )

    def __str__(self) -> str:
        """Render the LIFX color string."""
        parts = [self.name] if self.name else []
        for key in ("hue", "saturation", "brightness", "kelvin"):
            value = getattr(self, key)
            if value is not None:
                parts.append(f"{key}:{value}")
        return " ".join(parts)


@dataclass(frozen=True)
class State:
    """Desired state for every light matched by a selector.

    Attributes:
        power: "on" or "off".
        color: Color to set.
        brightness: Brightness (0.0-1.0).
        duration: Transition time in seconds.
        infrared: Maximum infrared level (0.0-1.0).
        fast: Ask the API to apply the change without reporting results.
    """

    power: str | None = None
    color: Color | str | None = None
    brightness: float | None = None
    duration: float | None = None
    infrared: float | None = None
    fast: bool = False


@dataclass(frozen=True)
class StateDelta:
    """Relative change applied to the current state.

    None means "leave unchanged"; 0 is a real change of zero.
    """

    power: str | None = None
    duration: float | None = None
    infrared: float | None = None
    hue: float | None = None
    saturation: float | None = None
    brightness: float | None = None
    kelvin: int | None = None


@dataclass(frozen=True)
class StateWithSelector:
    """A State scoped to its own selector, for batch updates."""

    selector: str
    state: State = field(default_factory=State)


@dataclass(frozen=True)
class States:
    """Several selector-scoped states plus defaults applied to each of them."""

    states: tuple[StateWithSelector, ...] = ()
    defaults: State = field(default_factory=State)


@dataclass(frozen=True)
class Toggle:
    """Power toggle with an optional transition time in seconds."""

    duration: float | None = None


@dataclass(frozen=True)
class Breathe:
    """Breathe effect: fade between two colors.

    Attributes:
        color: Color to breathe to.
        from_color: Color to start from. Defaults to the current color.
        period: Seconds per cycle.
        cycles: Number of cycles.
        persist: Keep the final color once the effect ends.
        power_on: Power the light on if it is off.
        peak: Where in the period the target color is at its maximum (0.0-1.0).
    """

    color: Color | str | None = None
    from_color: Color | str | None = None
    period: float = DEFAULT_BREATHE_PERIOD
    cycles: float = DEFAULT_BREATHE_CYCLES
    persist: bool = DEFAULT_BREATHE_PERSIST
    power_on: bool = DEFAULT_BREATHE_POWER_ON
    peak: float = DEFAULT_BREATHE_PEAK

    @property
    def is_valid(self) -> bool:
        """Check the effect parameters without raising."""
        return BREATHE_PEAK_MIN <= self.peak <= BREATHE_PEAK_MAX

    def validate(self) -> None:
        """Validate the effect parameters.

        Raises:
            InvalidParameterError: If peak is outside 0.0-1.0.
        """
        if not self.is_valid:
            msg = f"peak must be between {BREATHE_PEAK_MIN} and {BREATHE_PEAK_MAX}"
            raise InvalidParameterError(msg, parameter_name="peak", value=self.peak)
