"""
Reconciliation checker: replay a planned pattern before it is released.

check_pattern walks the entries pole to pole, applies each ShapingEvent to the
previous round's live stitch count, and verifies that the result lands exactly
on the next round's target. It also checks the structural guarantees the
engine promises: closure rounds at both ends, non-decreasing heights, and
operations placed singly within the round.

All errors are collected (not short-circuited) and returned in CheckerResult,
so a caller can log every problem found in one pass.

CheckerError carries:
  - round_index: the round whose incoming shaping (or own data) is wrong
  - message: human-readable description of the problem
  - error_type: "shaping" (bad event arithmetic or placement) or
                "structure" (rounds out of order, missing closures)
"""

from __future__ import annotations

from dataclasses import dataclass

from sphereknit.schemas.pattern import PatternEntry, ShapingEvent
from sphereknit.utilities.shaping import ShapingAction


@dataclass(frozen=True)
class CheckerError:
    """A single reconciliation failure."""

    round_index: int
    message: str
    error_type: str  # "shaping" | "structure"

    def __str__(self) -> str:
        return f"round {self.round_index}: {self.message}"


@dataclass(frozen=True)
class CheckerResult:
    """Outcome of checking one pattern."""

    passed: bool
    errors: tuple[CheckerError, ...]


def _check_event(index: int, before: int, event: ShapingEvent) -> list[CheckerError]:
    errors: list[CheckerError] = []

    def fail(message: str) -> None:
        errors.append(CheckerError(round_index=index, message=message, error_type="shaping"))

    if event.stitches_before != before:
        fail(f"event starts from {event.stitches_before} stitches but the round holds {before}")
    if len(event.positions) != event.operations:
        fail(f"{len(event.positions)} positions for {event.operations} operations")

    step = 1 if event.action == ShapingAction.INCREASE else -1
    if before + step * len(event.positions) != event.stitches_after:
        fail(
            f"{len(event.positions)} {event.action.value}s on {before} stitches give "
            f"{before + step * len(event.positions)}, not {event.stitches_after}"
        )

    # An increase follows a stitch; a decrease works the stitch and the one before it.
    lowest = 1 if event.action == ShapingAction.INCREASE else 2
    min_gap = 1 if event.action == ShapingAction.INCREASE else 2
    previous: int | None = None
    for position in event.positions:
        if not lowest <= position <= before:
            fail(f"operation at stitch {position} is outside 1..{before}")
        if previous is not None and position - previous < min_gap:
            fail(f"operations at stitches {previous} and {position} overlap")
        previous = position
    return errors


def check_pattern(entries: tuple[PatternEntry, ...]) -> CheckerResult:
    """
    Replay *entries* and validate the reconciliation invariant.

    Validation checks:
    1. The first and last rounds are closure rounds; no round in between is.
    2. Heights never decrease from one round to the next.
    3. Every round has a stitch count of at least 1 and a row count.
    4. For every adjacent pair the incoming event (or its absence) moves the
       previous stitch count to exactly the next round's target, with each
       operation placed singly inside the previous round.

    Returns a CheckerResult with ``passed=True`` when all checks pass.
    """
    errors: list[CheckerError] = []

    def structural(index: int, message: str) -> None:
        errors.append(CheckerError(round_index=index, message=message, error_type="structure"))

    if len(entries) < 2:
        structural(0, f"a pattern needs at least 2 rounds, got {len(entries)}")
        return CheckerResult(passed=False, errors=tuple(errors))

    last = len(entries) - 1
    previous_height = None
    previous_count: int | None = None

    for position, entry in enumerate(entries):
        rnd = entry.round
        if rnd.index != position:
            structural(position, f"round is labelled {rnd.index}")
        if rnd.is_closure and position not in (0, last):
            structural(position, "closure round in the middle of the pattern")
        elif not rnd.is_closure and position == 0:
            structural(position, "pattern does not start on a closure round")
        elif not rnd.is_closure and position == last:
            structural(position, "pattern does not end on a closure round")
        if previous_height is not None and rnd.height < previous_height:
            structural(position, f"height {rnd.height} is below previous {previous_height}")
        previous_height = rnd.height

        if rnd.stitch_count is None or rnd.row_count is None:
            structural(position, "stitch or row count was never converted")
            previous_count = None
            continue

        if previous_count is not None:
            event = entry.incoming
            if event is None:
                if rnd.stitch_count != previous_count:
                    errors.append(
                        CheckerError(
                            round_index=position,
                            message=(
                                f"no shaping but stitch count changes "
                                f"{previous_count} -> {rnd.stitch_count}"
                            ),
                            error_type="shaping",
                        )
                    )
            else:
                errors.extend(_check_event(position, previous_count, event))
                if event.stitches_after != rnd.stitch_count:
                    errors.append(
                        CheckerError(
                            round_index=position,
                            message=(
                                f"event ends at {event.stitches_after} stitches, "
                                f"round targets {rnd.stitch_count}"
                            ),
                            error_type="shaping",
                        )
                    )
        elif position == 0 and entry.incoming is not None:
            structural(0, "the first round cannot have incoming shaping")

        previous_count = rnd.stitch_count

    return CheckerResult(passed=len(errors) == 0, errors=tuple(errors))
