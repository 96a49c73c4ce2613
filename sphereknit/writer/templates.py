"""
Instruction prose templates for the TemplateWriter.

render_instruction converts a single Instruction into one line of pattern
prose. render_shaping spells out where every operation of a shaping row is
worked: exactly even spacing becomes a repeat ("*k3, inc; rep from * to
end"), anything else is written stitch for stitch with bracketed repeats
("k1, inc, [k2, inc] 4 times, k1"), so staggered and uneven placements can
be knitted exactly as planned.
"""

from __future__ import annotations

from itertools import groupby

from sphereknit.utilities.shaping import ShapingAction
from sphereknit.writer.instructions import Instruction, InstructionKind


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _row_label(ins: Instruction, rows: int | None = None) -> str:
    rows = ins.row_count if rows is None else rows
    if rows <= 1:
        return f"Round {ins.first_row}"
    return f"Rounds {ins.first_row}-{ins.first_row + rows - 1}"


def render_step(action: ShapingAction, gap: int) -> str:
    """One operation preceded by the plain stitches since the last one.

    *gap* counts stitches of the previous round; a decrease uses two of them.
    """
    if action == ShapingAction.INCREASE:
        return f"k{gap}, inc"
    plain = gap - 2
    return f"k{plain}, k2tog" if plain else "k2tog"


def render_repeat(action: ShapingAction, every_n: int) -> str:
    """Render exactly even shaping as a repeat worked to the end of the round."""
    return f"*{render_step(action, every_n)}; rep from * to end"


def render_sequence(action: ShapingAction, positions: tuple[int, ...], stitches: int) -> str:
    """
    Spell out operations worked after *positions* in a round of *stitches*.

    Runs of equal gaps are bracketed ("[k4, inc] 3 times"); stitches left
    after the last operation are knitted to finish the round.
    """
    gaps: list[int] = []
    previous = 0
    for position in positions:
        gaps.append(position - previous)
        previous = position
    tail = stitches - previous

    if tail == 0 and len(gaps) > 1 and len(set(gaps)) == 1:
        return render_repeat(action, gaps[0])

    parts: list[str] = []
    for gap, run in groupby(gaps):
        times = len(list(run))
        step = render_step(action, gap)
        parts.append(step if times == 1 else f"[{step}] {times} times")
    if tail:
        parts.append(f"k{tail}")
    return ", ".join(parts)


def render_shaping(ins: Instruction) -> str:
    """Phrase the shaping in *ins*; empty string when it has none."""
    action = ins.action
    if action is None:
        return ""
    abbrev = "inc" if action == ShapingAction.INCREASE else "dec"
    total = f"({abs(ins.delta)} {abbrev}, {ins.stitch_count} sts total)"
    return f"{render_sequence(action, ins.positions, ins.stitches_before)} {total}"


def _plain_sentence(rounds: int, stitch_count: int) -> str:
    return f"Knit {_plural(rounds, 'plain round')} of {stitch_count} stitches."


def render_instruction(ins: Instruction) -> str:
    """Render a single Instruction as one line of pattern prose."""
    plain = _plain_sentence(ins.plain_rounds, ins.stitch_count) if ins.plain_rounds else ""

    match ins.kind:
        case InstructionKind.CAST_ON:
            line = (
                f"{_row_label(ins)}: Cast on {ins.stitch_count} stitches "
                f"and join to work in the round."
            )
            return f"{line} {plain}" if plain else line
        case InstructionKind.PLAIN:
            return f"{_row_label(ins)}: {plain}"
        case InstructionKind.SHAPING:
            line = f"{_row_label(ins)}: {render_shaping(ins)}."
            return f"{line} {plain}" if plain else line
        case InstructionKind.CLOSE:
            parts = [f"{_row_label(ins)}:"]
            if ins.action is not None:
                parts.append(f"{render_shaping(ins)}.")
            if plain:
                parts.append(plain)
            parts.append(
                f"Break yarn, draw through the remaining {ins.stitch_count} stitches "
                f"and pull tight."
            )
            return " ".join(parts)
        case _:
            return f"[{ins.kind.value}]"
