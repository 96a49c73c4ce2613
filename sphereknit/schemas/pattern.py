"""
Pattern schema: shaping events and the finished round-by-round pattern.

A Pattern is the engine's only output. It pairs each Round with the
ShapingEvent (if any) that takes the previous round's stitches to this
round's count. Operations are stored as exact stitch positions so the
reconciliation checker can replay them.
"""

from __future__ import annotations

from dataclasses import dataclass

from sphereknit.schemas.sphere import Round, SphereSpec
from sphereknit.utilities.shaping import (
    ShapingAction,
    StitchInterval,
    action_for,
    summarize_intervals,
)


@dataclass(frozen=True)
class ShapingEvent:
    """
    Increases or decreases worked in the round that moves from one stitch
    count to the next.

    Attributes:
        delta: Signed stitch change; never zero.
        spacing: Stitches of the previous round per operation (real-valued).
        positions: 1-based stitch offsets into the previous round after which
            each operation is worked.
        stitches_before: Live stitches entering the round.
        stitches_after: Live stitches after the round.
    """

    delta: int
    spacing: float
    positions: tuple[int, ...]
    stitches_before: int
    stitches_after: int

    def __post_init__(self) -> None:
        if self.delta == 0:
            raise ValueError("delta must be non-zero; a plain round has no ShapingEvent")
        if isinstance(self.positions, list):
            object.__setattr__(self, "positions", tuple(self.positions))

    @property
    def action(self) -> ShapingAction:
        return action_for(self.delta)

    @property
    def operations(self) -> int:
        return abs(self.delta)

    @property
    def stitch_intervals(self) -> list[StitchInterval]:
        return summarize_intervals(self.positions, self.stitches_before)


@dataclass(frozen=True)
class PatternEntry:
    """A round and the shaping that leads into it (None for plain rounds)."""

    round: Round
    incoming: ShapingEvent | None = None


@dataclass(frozen=True)
class Pattern:
    """
    A complete sphere pattern, ordered pole to pole.

    Attributes:
        spec: The request the pattern was computed from.
        entries: One entry per round, starting and ending with a closure round.
        round_count: Number of segments between rounds (len(entries) - 1).
        attempts: Round counts tried before this one succeeded (1 = first try).
    """

    spec: SphereSpec
    entries: tuple[PatternEntry, ...]
    attempts: int = 1

    def __post_init__(self) -> None:
        if len(self.entries) < 2:
            raise ValueError(f"a pattern needs at least 2 rounds, got {len(self.entries)}")

    @property
    def round_count(self) -> int:
        return len(self.entries) - 1

    @property
    def rounds(self) -> tuple[Round, ...]:
        return tuple(e.round for e in self.entries)

    @property
    def stitch_counts(self) -> tuple[int, ...]:
        return tuple(e.round.stitch_count or 0 for e in self.entries)

    @property
    def total_rows(self) -> int:
        return sum(e.round.row_count or 0 for e in self.entries)
