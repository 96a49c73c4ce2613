"""
Structured per-round instructions built from a Pattern.

This is the output boundary of the engine: one Instruction per Round, in
knitting order, carrying the row numbers it covers, its stitch count, and
the shaping (if any) worked at its start. Formatting to prose is done by
the TemplateWriter; other front ends can consume these directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sphereknit.schemas.pattern import Pattern
from sphereknit.utilities.shaping import ShapingAction, StitchInterval


class InstructionKind(str, Enum):
    """What the knitter does at the start of the round."""

    CAST_ON = "cast_on"
    SHAPING = "shaping"
    PLAIN = "plain"
    CLOSE = "close"


@dataclass(frozen=True)
class Instruction:
    """
    Knitting instruction for one Round.

    Attributes:
        kind: CAST_ON for the first pole, CLOSE for the last, otherwise
            SHAPING or PLAIN depending on whether the stitch count changes.
        round_index: Index of the Round this instruction knits.
        first_row: 1-based number of the first row worked.
        row_count: Rows worked at this stitch count (including a shaping row).
        stitch_count: Live stitches once the first row is done.
        plain_rounds: Rows knitted without shaping after the first row (all
            of them for a PLAIN instruction).
        delta: Signed stitch change worked in the first row; 0 if none.
        intervals: Gap sizes between shaping operations and how often each
            occurs; empty if there is no shaping.
        positions: 1-based stitches of the previous round after which each
            operation is worked; empty if there is no shaping.
    """

    kind: InstructionKind
    round_index: int
    first_row: int
    row_count: int
    stitch_count: int
    plain_rounds: int
    delta: int = 0
    intervals: tuple[StitchInterval, ...] = ()
    positions: tuple[int, ...] = ()

    @property
    def last_row(self) -> int:
        return self.first_row + self.row_count - 1

    @property
    def stitches_before(self) -> int:
        """Live stitches before the shaping row."""
        return self.stitch_count - self.delta

    @property
    def action(self) -> ShapingAction | None:
        if self.delta == 0:
            return None
        return ShapingAction.INCREASE if self.delta > 0 else ShapingAction.DECREASE

    @property
    def every_n_stitches(self) -> int | None:
        """The regular spacing when operations are exactly evenly spaced."""
        if len(self.intervals) == 1:
            return self.intervals[0].every_n_stitches
        return None


def build_instructions(pattern: Pattern) -> tuple[Instruction, ...]:
    """Turn *pattern* into one Instruction per round, numbering rows from 1."""
    instructions: list[Instruction] = []
    row = 1
    last = len(pattern.entries) - 1

    for position, entry in enumerate(pattern.entries):
        rnd = entry.round
        event = entry.incoming
        rows = rnd.row_count or 1
        stitches = rnd.stitch_count or 0

        if position == 0:
            kind = InstructionKind.CAST_ON
        elif position == last:
            kind = InstructionKind.CLOSE
        elif event is not None:
            kind = InstructionKind.SHAPING
        else:
            kind = InstructionKind.PLAIN

        # The cast-on row and a shaping row each take the first row; a plain
        # round is plain throughout.
        takes_first_row = kind == InstructionKind.CAST_ON or event is not None
        instructions.append(
            Instruction(
                kind=kind,
                round_index=rnd.index,
                first_row=row,
                row_count=rows,
                stitch_count=stitches,
                plain_rounds=rows - 1 if takes_first_row else rows,
                delta=event.delta if event else 0,
                intervals=tuple(event.stitch_intervals) if event else (),
                positions=event.positions if event else (),
            )
        )
        row += rows

    return tuple(instructions)
