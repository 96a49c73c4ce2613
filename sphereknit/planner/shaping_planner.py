"""
Shaping Planner: the increase/decrease event between each pair of rounds.

For each adjacent pair the planner computes delta = next - previous and, when
it is non-zero, spreads |delta| single operations evenly around the previous
round. Operations must fit singly: an increase needs one stitch to follow,
a decrease needs two stitches to work together. When they do not fit the
planner raises OverconstrainedShaping and lets the engine retry with a
different round count.
"""

from __future__ import annotations

from sphereknit.errors import OverconstrainedShaping
from sphereknit.schemas.pattern import PatternEntry, ShapingEvent
from sphereknit.schemas.sphere import Round
from sphereknit.utilities.shaping import (
    action_for,
    distribute_evenly,
    stagger,
    stitches_needed,
)


def plan_event(
    before: int,
    after: int,
    round_index: int = 0,
    staggered: bool = False,
) -> ShapingEvent | None:
    """
    Plan the shaping that turns *before* stitches into *after* stitches.

    Args:
        before: Live stitches in the previous round.
        after: Target stitches in the round being planned.
        round_index: Index of the round being planned (for messages and
            staggering).
        staggered: Offset the operations by a round-dependent amount.

    Returns:
        None for a plain round, otherwise a ShapingEvent.

    Raises:
        OverconstrainedShaping: If the operations cannot be placed singly.
    """
    delta = after - before
    if delta == 0:
        return None

    action = action_for(delta)
    operations = abs(delta)
    if stitches_needed(action, operations) > before:
        raise OverconstrainedShaping(round_index, before, delta)

    positions = distribute_evenly(before, operations)
    if staggered:
        positions = stagger(positions, action, before, round_index)

    return ShapingEvent(
        delta=delta,
        spacing=before / operations,
        positions=positions,
        stitches_before=before,
        stitches_after=after,
    )


def plan_shaping(rounds: tuple[Round, ...], staggered: bool = False) -> tuple[PatternEntry, ...]:
    """
    Attach the incoming ShapingEvent to every round after the first.

    *rounds* must already carry stitch counts (see the Gauge Converter).
    """
    entries: list[PatternEntry] = []
    previous: Round | None = None
    for rnd in rounds:
        if rnd.stitch_count is None:
            raise ValueError(f"round {rnd.index} has no stitch_count; convert it first")
        if previous is None:
            entries.append(PatternEntry(round=rnd))
        else:
            event = plan_event(
                before=previous.stitch_count or 0,
                after=rnd.stitch_count,
                round_index=rnd.index,
                staggered=staggered,
            )
            entries.append(PatternEntry(round=rnd, incoming=event))
        previous = rnd
    return tuple(entries)
