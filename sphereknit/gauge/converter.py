"""
Gauge Converter: turn each round's circumference into stitch and row counts.

Rounding is half-up throughout. A non-pole round is never given fewer than
one stitch; pole rounds get the fixed closure count instead of a
gauge-derived one. The rounds right next to each pole are held at the
closure count or more, so the pattern never decreases straight after the
cast-on ring or increases straight before the closing one.
"""

from __future__ import annotations

import math
from dataclasses import replace

from sphereknit.geometry.sampler import segment_arc_length
from sphereknit.schemas.sphere import Round, SphereSpec
from sphereknit.utilities.conversion import (
    physical_to_row_count,
    physical_to_stitch_count,
    round_half_up,
)
from sphereknit.utilities.types import Gauge


def equator_stitch_count(spec: SphereSpec) -> int:
    """Stitches in the widest round, round(π·d × stitches-per-unit)."""
    return round_half_up(physical_to_stitch_count(math.pi * spec.diameter.value, spec.gauge))


def convert_round(
    rnd: Round,
    segment_arc: float,
    gauge: Gauge,
    closure_stitch_count: int,
    minimum_stitches: int = 1,
) -> Round:
    """Return a copy of *rnd* with stitch_count and row_count populated."""
    if rnd.is_closure:
        stitches = closure_stitch_count
    else:
        raw = round_half_up(physical_to_stitch_count(rnd.circumference, gauge))
        stitches = max(minimum_stitches, raw)
    rows = max(1, round_half_up(physical_to_row_count(segment_arc, gauge)))
    return replace(rnd, stitch_count=stitches, row_count=rows)


def convert_rounds(
    rounds: tuple[Round, ...],
    spec: SphereSpec,
    closure_stitch_count: int,
) -> tuple[Round, ...]:
    """
    Convert every round in *rounds* against the sphere's gauge.

    Every segment has the same arc length under polar-angle spacing, so
    every round gets the same row count, including round 0 (the cast-on
    ring), which has no incoming segment of its own.
    """
    if len(rounds) < 2:
        raise ValueError(f"need at least 2 rounds, got {len(rounds)}")
    if closure_stitch_count < 1:
        raise ValueError(f"closure_stitch_count must be >= 1, got {closure_stitch_count}")
    arc = segment_arc_length(spec, len(rounds) - 1)
    pole_neighbours = {1, len(rounds) - 2}
    return tuple(
        convert_round(
            r,
            arc,
            spec.gauge,
            closure_stitch_count,
            minimum_stitches=closure_stitch_count if position in pole_neighbours else 1,
        )
        for position, r in enumerate(rounds)
    )
