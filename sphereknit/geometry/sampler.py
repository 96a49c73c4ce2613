"""
Geometry Sampler: slice a sphere into evenly spaced horizontal rounds.

Rounds are spaced evenly in polar angle, θ_k = k·π/N, which spaces them
evenly along the knitted surface (arc length r·π/N apart) rather than along
the vertical axis. Knitting lays rows down at constant tension along the
fabric, so equal arc length is what equal row counts produce.

All functions are pure; SphereSpec has already validated its inputs.
"""

from __future__ import annotations

import math

from sphereknit.schemas.sphere import Round, SphereSpec
from sphereknit.utilities.conversion import physical_to_row_count, round_half_up


def hemisphere_round_count(spec: SphereSpec) -> int:
    """
    Segments from one pole to the equator.

    round(quarter-meridian × rows-per-unit), clamped to at least 1 so even a
    vanishing sphere reaches its equator.
    """
    quarter_meridian = spec.half_meridian / 2.0
    return max(1, round_half_up(physical_to_row_count(quarter_meridian, spec.gauge)))


def round_count_for(spec: SphereSpec) -> int:
    """
    Number of segments N between pole rounds.

    Always even: each hemisphere gets the same number of segments, so round
    N/2 sits exactly on the equator.
    """
    return 2 * hemisphere_round_count(spec)


def segment_arc_length(spec: SphereSpec, n: int) -> float:
    """Surface distance between adjacent rounds when there are *n* segments."""
    return spec.half_meridian / n


def sample_rounds(spec: SphereSpec, n: int) -> tuple[Round, ...]:
    """
    Produce N+1 rounds from pole to pole with geometry populated.

    Args:
        spec: The sphere being knitted.
        n: Number of segments; rounds are indexed 0..n.

    Returns:
        Rounds with height and circumference set and stitch/row counts left
        as None. Rounds 0 and n are closure rounds with zero circumference.

    Raises:
        ValueError: If n < 1.
    """
    if n < 1:
        raise ValueError(f"round count must be >= 1, got {n}")

    r = spec.radius
    rounds: list[Round] = []
    for k in range(n + 1):
        # k·π/n can miss π/2 by an ulp; the equator must hold the full width.
        theta = math.pi / 2.0 if 2 * k == n else k * math.pi / n
        is_pole = k in (0, n)
        # sin(π) is ~1e-16 in floating point, not 0.
        circumference = 0.0 if is_pole else 2.0 * math.pi * r * math.sin(theta)
        height = spec.diameter.value if k == n else r * (1.0 - math.cos(theta))
        rounds.append(
            Round(
                index=k,
                polar_angle=theta,
                height=height,
                circumference=circumference,
                is_closure=is_pole,
            )
        )
    return tuple(rounds)
