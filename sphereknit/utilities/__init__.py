"""
Shared utilities for the sphere pattern engine.

Provides deterministic tools used identically by the engine stages and the
reconciliation checker: validated value types, unit conversion, rounding,
and even distribution of shaping operations around a round.
"""

from .conversion import (
    CM_PER_INCH,
    convert_gauge,
    convert_length,
    convert_measurement,
    physical_to_row_count,
    physical_to_stitch_count,
    round_half_up,
    row_count_to_physical,
    stitch_count_to_physical,
)
from .shaping import (
    ShapingAction,
    StitchInterval,
    distribute_evenly,
    stagger,
    summarize_intervals,
)
from .types import Gauge, Measurement, Unit

__all__ = [
    # types
    "Gauge",
    "Measurement",
    "Unit",
    "ShapingAction",
    "StitchInterval",
    # conversion
    "CM_PER_INCH",
    "round_half_up",
    "convert_length",
    "convert_measurement",
    "convert_gauge",
    "physical_to_stitch_count",
    "physical_to_row_count",
    "stitch_count_to_physical",
    "row_count_to_physical",
    # shaping
    "distribute_evenly",
    "summarize_intervals",
    "stagger",
]
