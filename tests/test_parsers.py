"""Tests for the parsers module."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from pylifxcloud.exceptions import LifxDecodeError
from pylifxcloud.models import HSBKColor, LifxResponse, Light, Selector, Status
from pylifxcloud.parsers import parse_error_envelope, parse_light, parse_lights, parse_response


class TestParseLight:
    """Tests for parse_light function."""

    def test_parse_complete_light(self, light_payload: dict[str, Any]) -> None:
        """Test parsing a fully populated light."""
        light = parse_light(light_payload)

        assert isinstance(light, Light)
        assert light.id == "d073d5000001"
        assert light.label == "Desk"
        assert light.connected is True
        assert light.is_on is True
        assert light.color == HSBKColor(hue=120.0, saturation=1.0, kelvin=3500)
        assert light.brightness == 0.75
        assert light.group == Selector(id="1c8de82b81f445e7cfaafae49b259c71", name="Office")
        assert light.location.name == "Home"
        assert light.product.identifier == "lifx_a19"
        assert light.product.capabilities.has_color is True
        assert light.product.capabilities.min_kelvin == 2500
        assert light.last_seen == datetime(2024, 5, 1, 8, 53, 2, 867000, tzinfo=UTC)
        assert light.seconds_last_seen == 2.5

    def test_parse_minimal_light(self) -> None:
        """Test missing optional fields fall back to defaults."""
        light = parse_light({"id": "d073d5000009"})

        assert light.label == ""
        assert light.connected is False
        assert light.is_on is False
        assert light.last_seen is None
        assert light.product.capabilities.has_ir is False

    def test_parse_zulu_timestamp(self) -> None:
        """Test a trailing Z is read as UTC."""
        light = parse_light({"id": "x", "last_seen": "2024-05-01T08:53:02Z"})

        assert light.last_seen == datetime(2024, 5, 1, 8, 53, 2, tzinfo=UTC)

    def test_parse_legacy_seconds_field(self) -> None:
        """Test the older seconds_last_seen field is accepted."""
        light = parse_light({"id": "x", "seconds_last_seen": 12})

        assert light.seconds_last_seen == 12

    def test_missing_id(self) -> None:
        """Test a light without id is rejected."""
        with pytest.raises(LifxDecodeError, match="id"):
            parse_light({"label": "Desk"})

    def test_invalid_timestamp(self) -> None:
        """Test an unparsable timestamp is a decode error."""
        with pytest.raises(LifxDecodeError, match="last_seen"):
            parse_light({"id": "x", "last_seen": "yesterday"})

    def test_wrong_nested_type(self) -> None:
        """Test a nested field of the wrong type is a decode error."""
        with pytest.raises(LifxDecodeError):
            parse_light({"id": "x", "product": "LIFX A19"})

    @pytest.mark.parametrize(
        "fields",
        [
            {"id": 5},
            {"label": 12},
            {"power": True},
            {"group": {"id": "g", "name": None}},
            {"product": {"name": "LIFX A19", "company": 1}},
        ],
    )
    def test_string_field_of_wrong_type(self, fields: dict[str, Any]) -> None:
        """Test a non-string where a string is expected is a decode error."""
        with pytest.raises(LifxDecodeError, match="Expected string"):
            parse_light({"id": "x", **fields})

    @pytest.mark.parametrize(
        "fields",
        [
            {"brightness": "very"},
            {"brightness": True},
            {"seconds_since_seen": "2"},
            {"color": {"hue": "red"}},
            {"color": {"kelvin": None}},
            {"product": {"capabilities": {"max_kelvin": "9000"}}},
        ],
    )
    def test_number_field_of_wrong_type(self, fields: dict[str, Any]) -> None:
        """Test a non-number, including a boolean, where a number is expected is a decode error."""
        with pytest.raises(LifxDecodeError, match="Expected number"):
            parse_light({"id": "x", **fields})

    def test_integer_accepted_for_float(self) -> None:
        """Test JSON integers decode into float fields."""
        light = parse_light({"id": "x", "brightness": 1, "color": {"hue": 0, "saturation": 1, "brightness": 0}})

        assert light.brightness == 1
        assert light.color == HSBKColor(hue=0, saturation=1, kelvin=0, brightness=0)

    @pytest.mark.parametrize(
        "fields",
        [{"connected": "yes"}, {"connected": 1}, {"product": {"capabilities": {"has_color": "true"}}}],
    )
    def test_boolean_field_of_wrong_type(self, fields: dict[str, Any]) -> None:
        """Test a non-boolean where a boolean is expected is a decode error."""
        with pytest.raises(LifxDecodeError, match="Expected boolean"):
            parse_light({"id": "x", **fields})

    def test_mixed_wrong_types(self) -> None:
        """Test a light with several mistyped fields is rejected."""
        with pytest.raises(LifxDecodeError):
            parse_light({"id": 5, "brightness": "very", "connected": "yes", "color": {"hue": "red"}})


class TestParseLights:
    """Tests for parse_lights function."""

    def test_parse_list(self, light_payload: dict[str, Any]) -> None:
        """Test parsing an array of lights."""
        lights = parse_lights([light_payload, {"id": "d073d5000002", "power": "off"}])

        assert [light.id for light in lights] == ["d073d5000001", "d073d5000002"]
        assert lights[1].is_on is False

    def test_parse_empty_list(self) -> None:
        """Test an empty array yields an empty list."""
        assert parse_lights([]) == []

    def test_not_a_list(self) -> None:
        """Test an object instead of an array is rejected."""
        with pytest.raises(LifxDecodeError, match="array"):
            parse_lights({"id": "x"})


class TestParseResponse:
    """Tests for parse_response function."""

    def test_parse_flat_results(self) -> None:
        """Test parsing per-light results."""
        response = parse_response(
            {
                "results": [
                    {"id": "a", "label": "Desk", "status": "ok"},
                    {"id": "b", "label": "Lamp", "status": "timed_out"},
                ]
            }
        )

        assert isinstance(response, LifxResponse)
        assert response.results[0].status is Status.OK
        assert response.results[1].status is Status.TIMED_OUT
        assert response.all_ok is False

    def test_all_ok(self) -> None:
        """Test all_ok when every light succeeded."""
        response = parse_response({"results": [{"id": "a", "status": "ok"}]})

        assert response.all_ok is True

    def test_result_id_of_wrong_type(self) -> None:
        """Test a result whose id is not a string is rejected."""
        with pytest.raises(LifxDecodeError, match="Expected string"):
            parse_response({"results": [{"id": 7, "status": "ok"}]})

    def test_unknown_status(self) -> None:
        """Test an unknown status string is kept as None."""
        response = parse_response({"results": [{"id": "a", "status": "exploded"}]})

        assert response.results[0].status is None

    def test_parse_nested_results(self) -> None:
        """Test parsing the batch form with operations and nested results."""
        response = parse_response(
            {
                "results": [
                    {
                        "operation": {"selector": "all", "power": "on"},
                        "results": [{"id": "a", "label": "Desk", "status": "ok"}],
                    }
                ]
            }
        )

        assert response.results[0].operation == {"selector": "all", "power": "on"}
        assert response.results[0].results[0].label == "Desk"
        assert response.all_ok is True

    def test_empty_object(self) -> None:
        """Test an object without results yields no results."""
        assert parse_response({}).results == ()

    @pytest.mark.parametrize("body", [None, [], "ok", {"results": "ok"}, {"results": ["ok"]}])
    def test_wrong_shape(self, body: Any) -> None:
        """Test bodies of the wrong shape are rejected."""
        with pytest.raises(LifxDecodeError):
            parse_response(body)


class TestParseErrorEnvelope:
    """Tests for parse_error_envelope function."""

    def test_parse_full_envelope(self) -> None:
        """Test parsing message, field errors and warnings."""
        envelope = parse_error_envelope(
            {
                "error": "Validation error",
                "errors": [{"field": "color", "message": ["Unable to parse color"]}],
                "warnings": [{"warning": "Unknown parameter", "unknown_params": {"colour": "red"}}],
            }
        )

        assert envelope.error == "Validation error"
        assert envelope.errors[0].field == "color"
        assert envelope.errors[0].message == ("Unable to parse color",)
        assert envelope.warnings[0]["warning"] == "Unknown parameter"

    def test_message_as_string(self) -> None:
        """Test a single message string is wrapped in a tuple."""
        envelope = parse_error_envelope({"errors": [{"field": "peak", "message": "out of range"}]})

        assert envelope.error == ""
        assert envelope.errors[0].message == ("out of range",)

    def test_not_an_envelope(self) -> None:
        """Test an object without error keys is rejected."""
        with pytest.raises(LifxDecodeError):
            parse_error_envelope({"results": []})
