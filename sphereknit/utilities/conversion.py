"""
Unit conversion between physical dimensions and stitch/row counts.

Physical dimensions are in whatever unit the gauge is expressed in; the
caller is responsible for keeping them consistent. All functions are pure.
"""

from __future__ import annotations

import math

from .types import Gauge, Measurement, Unit

CM_PER_INCH: float = 2.54


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up.

    Python's built-in round() uses banker's rounding, which would make a
    circumference of 4.5 stitches come out as 4.
    """
    return math.floor(value + 0.5)


def convert_length(value: float, source: Unit, target: Unit) -> float:
    """Convert a length between inches and centimeters."""
    if source == target:
        return value
    if source == Unit.INCH:
        return value * CM_PER_INCH
    return value / CM_PER_INCH


def convert_measurement(measurement: Measurement, target: Unit) -> Measurement:
    """Return *measurement* expressed in *target* units."""
    return Measurement(convert_length(measurement.value, measurement.unit, target), target)


def convert_gauge(gauge: Gauge, target: Unit) -> Gauge:
    """Return *gauge* expressed per *target* unit.

    Densities convert inversely to lengths: 5 stitches per inch is
    5 / 2.54 stitches per centimeter.
    """
    if gauge.unit == target:
        return gauge
    factor = convert_length(1.0, target, gauge.unit)
    return Gauge(
        stitches_per_unit=gauge.stitches_per_unit * factor,
        rows_per_unit=gauge.rows_per_unit * factor,
        unit=target,
    )


def physical_to_stitch_count(length: float, gauge: Gauge) -> float:
    """Convert a physical length to a raw (non-integer) stitch count."""
    return length * gauge.stitches_per_unit


def physical_to_row_count(length: float, gauge: Gauge) -> float:
    """Convert a physical length to a raw (non-integer) row count."""
    return length * gauge.rows_per_unit


def stitch_count_to_physical(count: float, gauge: Gauge) -> float:
    """Convert a stitch count to a physical length."""
    return count / gauge.stitches_per_unit


def row_count_to_physical(count: float, gauge: Gauge) -> float:
    """Convert a row count to a physical length."""
    return count / gauge.rows_per_unit
