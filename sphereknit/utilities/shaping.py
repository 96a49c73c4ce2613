"""
Shaping distribution: spread increases/decreases evenly around a round.

Given the live stitch count of a round and the number of shaping operations
to work in it, places each operation as far from its neighbours as possible
(Bresenham-style): the k-th operation goes after stitch floor(k × n / ops).

The resulting gaps take at most two values, floor(n / ops) and
ceil(n / ops), which is how knitting patterns usually phrase uneven
shaping ("inc every 4th st 7 times, then every 5th st 3 times").
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum


class ShapingAction(str, Enum):
    """Direction of a shaping operation."""

    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class StitchInterval:
    """A run of shaping operations worked every N stitches, repeated M times."""

    every_n_stitches: int
    times: int


def action_for(delta: int) -> ShapingAction:
    """INCREASE for a positive delta, DECREASE otherwise."""
    return ShapingAction.INCREASE if delta > 0 else ShapingAction.DECREASE


def stitches_needed(action: ShapingAction, operations: int) -> int:
    """Minimum live stitches needed to work *operations* single shaping operations.

    An increase can follow any stitch. A decrease works two stitches
    together, so no two decreases may share a stitch.
    """
    return operations if action == ShapingAction.INCREASE else 2 * operations


def distribute_evenly(stitch_count: int, operations: int) -> tuple[int, ...]:
    """
    Place *operations* shaping operations evenly across *stitch_count* stitches.

    Args:
        stitch_count: Live stitches in the round being worked.
        operations: Number of single increases or decreases to place.

    Returns:
        Strictly increasing 1-based stitch positions; each operation is
        worked immediately after the stitch at that position. The last
        position is always *stitch_count*.

    Raises:
        ValueError: If operations < 1 or operations > stitch_count.
    """
    if operations < 1:
        raise ValueError(f"operations must be >= 1, got {operations}")
    if operations > stitch_count:
        raise ValueError(
            f"Not enough stitches ({stitch_count}) for {operations} shaping operations"
        )
    # Integer arithmetic keeps floor(k * n / ops) exact for every k.
    return tuple((k * stitch_count) // operations for k in range(1, operations + 1))


def gaps_between(positions: tuple[int, ...], stitch_count: int) -> tuple[int, ...]:
    """Stitches from the previous operation (or round start) to each operation."""
    gaps: list[int] = []
    previous = 0
    for position in positions:
        gaps.append(position - previous)
        previous = position
    # Stitches after the last operation wrap around to the first gap.
    if gaps:
        gaps[0] += stitch_count - previous
    return tuple(gaps)


def summarize_intervals(positions: tuple[int, ...], stitch_count: int) -> list[StitchInterval]:
    """
    Collapse evenly spread positions into one or two StitchIntervals.

    Convention: list the more frequent (shorter) interval first, then the
    less frequent one. Empty if there are no positions.
    """
    counts = Counter(gaps_between(positions, stitch_count))
    return [StitchInterval(every_n_stitches=gap, times=counts[gap]) for gap in sorted(counts)]


def stagger(
    positions: tuple[int, ...],
    action: ShapingAction,
    stitch_count: int,
    round_index: int,
) -> tuple[int, ...]:
    """
    Shift *positions* left by a round-dependent offset.

    Successive shaping rounds that all start at the same stitch stack their
    increases into a visible seam. Shifting by ``round_index`` modulo the slack
    left by the smallest gap keeps the gaps identical while moving the column.
    """
    if not positions:
        return positions
    smallest_gap = min(gaps_between(positions, stitch_count))
    lowest = 1 if action == ShapingAction.INCREASE else 2
    slack = min(smallest_gap, positions[0]) - lowest + 1
    if slack <= 1:
        return positions
    offset = round_index % slack
    return tuple(p - offset for p in positions)
