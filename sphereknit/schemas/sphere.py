"""
Sphere geometry schema: the engine's input and its per-round slices.

SphereSpec is the unit of exchange between the caller and the engine. It is
built once per pattern request and never mutated. Round is one horizontal
cross-section of the sphere; the Geometry Sampler fills in the geometric
fields and the Gauge Converter returns copies with counts populated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sphereknit.errors import InvalidSpec
from sphereknit.utilities.types import Gauge, Measurement, Unit


@dataclass(frozen=True)
class SphereSpec:
    """
    A sphere to knit: its diameter and the knitter's gauge.

    Both must be expressed in the same unit; convert beforehand with
    sphereknit.utilities.conversion if they are not.
    """

    diameter: Measurement
    gauge: Gauge

    def __post_init__(self) -> None:
        if self.diameter.unit != self.gauge.unit:
            raise InvalidSpec(
                f"diameter is in {self.diameter.unit.label} but gauge is per "
                f"{self.gauge.unit.label}; convert one of them first"
            )
        # Round and stitch counts are these products; past float range they are inf.
        rows = self.half_meridian * self.gauge.rows_per_unit
        stitches = math.pi * self.diameter.value * self.gauge.stitches_per_unit
        if not (math.isfinite(rows) and math.isfinite(stitches)):
            raise InvalidSpec(
                f"a {self.diameter.value:g} {self.unit.label} sphere at this gauge is too "
                f"large to count in stitches and rows"
            )

    @classmethod
    def from_values(
        cls,
        diameter: float,
        unit: Unit | str,
        stitches_per_unit: float,
        rows_per_unit: float,
    ) -> SphereSpec:
        """Build a spec from the four raw inputs a form or CLI supplies."""
        parsed = Unit.parse(unit)
        return cls(
            diameter=Measurement(diameter, parsed),
            gauge=Gauge(stitches_per_unit, rows_per_unit, parsed),
        )

    @property
    def unit(self) -> Unit:
        return self.diameter.unit

    @property
    def radius(self) -> float:
        return self.diameter.value / 2.0

    @property
    def half_meridian(self) -> float:
        """Surface distance from pole to pole (π·r)."""
        return math.pi * self.radius


@dataclass(frozen=True)
class Round:
    """
    One horizontal slice of the sphere, knitted as a single round.

    Attributes:
        index: Position from the starting pole (0-based).
        polar_angle: Angle from the starting pole in radians, 0..π.
        height: Distance from the starting pole along the polar axis.
        circumference: Length of the slice's circle.
        is_closure: True for the two pole rounds.
        stitch_count: Target stitches, or None before gauge conversion.
        row_count: Rows worked at this stitch count, or None before conversion.
    """

    index: int
    polar_angle: float
    height: float
    circumference: float
    is_closure: bool = False
    stitch_count: int | None = None
    row_count: int | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if self.circumference < 0:
            raise ValueError(f"circumference must be >= 0, got {self.circumference}")
        if self.stitch_count is not None and self.stitch_count < 1:
            raise ValueError(f"stitch_count must be >= 1, got {self.stitch_count}")
        if self.row_count is not None and self.row_count < 1:
            raise ValueError(f"row_count must be >= 1, got {self.row_count}")
