"""Tests for api.generate — generate_pattern() and convert_spec()."""

from __future__ import annotations

import pytest

from sphereknit.api.generate import convert_spec, generate_pattern
from sphereknit.errors import InvalidSpec, UnshapableSpec
from sphereknit.schemas.sphere import SphereSpec
from sphereknit.settings.registry import EngineSettings
from sphereknit.utilities.types import Unit


class TestGeneratePattern:
    def test_returns_pattern(self):
        result = generate_pattern(10.0, "cm", 4.0, 5.0)
        assert result.ok
        assert result.pattern.round_count == 78

    def test_accepts_unit_enum(self):
        result = generate_pattern(10.0, Unit.INCH, 4.0, 5.0)
        assert result.pattern.spec.unit is Unit.INCH

    @pytest.mark.parametrize(
        "args",
        [
            (0.0, "in", 4.0, 5.0),
            (-3.0, "in", 4.0, 5.0),
            (10.0, "in", 0.0, 5.0),
            (10.0, "in", 4.0, 0.0),
            (10.0, "furlongs", 4.0, 5.0),
            (1.0, "in", 1e308, 1.0),
            (1e308, "in", 1.0, 5.0),
            (1e6, "in", 1.0, 1e3),
            (10.0, "in", 1000.0, 5.0),
        ],
    )
    def test_invalid_input_is_returned(self, args):
        result = generate_pattern(*args)
        assert not result.ok
        assert result.pattern is None
        assert isinstance(result.error, InvalidSpec)

    def test_unshapable_is_returned(self):
        result = generate_pattern(10.0, "in", 20.0, 2.0)
        assert isinstance(result.error, UnshapableSpec)

    def test_settings_are_used(self):
        result = generate_pattern(10.0, "cm", 4.0, 5.0, EngineSettings(closure_stitch_count=7))
        assert result.pattern.stitch_counts[0] == 7


class TestConvertSpec:
    def test_inches_to_cm(self):
        spec = SphereSpec.from_values(4.0, "in", 5.0, 7.0)
        converted = convert_spec(spec, "cm")
        assert converted.unit is Unit.CENTIMETER
        assert converted.diameter.value == pytest.approx(10.16)
        assert converted.gauge.stitches_per_unit == pytest.approx(5.0 / 2.54)

    def test_conversion_keeps_round_count(self):
        """Unit changes scale diameter and gauge inversely, so N is unchanged."""
        spec = SphereSpec.from_values(4.0, "in", 5.0, 7.0)
        a = generate_pattern(4.0, "in", 5.0, 7.0).pattern
        converted = convert_spec(spec, Unit.CENTIMETER)
        b = generate_pattern(
            converted.diameter.value,
            converted.unit,
            converted.gauge.stitches_per_unit,
            converted.gauge.rows_per_unit,
        ).pattern
        assert a.round_count == b.round_count
