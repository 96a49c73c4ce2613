"""
Core type definitions for the shared utilities layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
Invalid values raise InvalidSpec, which is also a ValueError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from sphereknit.errors import InvalidSpec

_UNIT_ALIASES: dict[str, str] = {
    "in": "in",
    "inch": "in",
    "inches": "in",
    '"': "in",
    "cm": "cm",
    "centimeter": "cm",
    "centimeters": "cm",
    "centimetre": "cm",
    "centimetres": "cm",
}


class Unit(str, Enum):
    """Length unit shared by a diameter and its gauge."""

    INCH = "in"
    CENTIMETER = "cm"

    @property
    def label(self) -> str:
        """Short display label, e.g. for ``Stitches/in``."""
        return self.value

    @classmethod
    def parse(cls, text: str | Unit) -> Unit:
        """Accept a Unit or a common spelling of one."""
        if isinstance(text, Unit):
            return text
        key = _UNIT_ALIASES.get(str(text).strip().lower())
        if key is None:
            raise InvalidSpec(f"unknown unit {text!r}; expected inches or centimeters")
        return cls(key)


def _require_positive(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidSpec(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidSpec(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class Measurement:
    """A positive length in a single unit."""

    value: float
    unit: Unit

    def __post_init__(self) -> None:
        _require_positive("measurement", self.value)
        object.__setattr__(self, "unit", Unit.parse(self.unit))


@dataclass(frozen=True)
class Gauge:
    """
    Knitting gauge: stitch and row density per unit length.

    Both values must be strictly positive and are expressed in the same unit
    as the measurement they are combined with. Gauges are immutable after
    construction and safe to share across modules.
    """

    stitches_per_unit: float
    rows_per_unit: float
    unit: Unit = Unit.INCH

    def __post_init__(self) -> None:
        _require_positive("stitches_per_unit", self.stitches_per_unit)
        _require_positive("rows_per_unit", self.rows_per_unit)
        object.__setattr__(self, "unit", Unit.parse(self.unit))
