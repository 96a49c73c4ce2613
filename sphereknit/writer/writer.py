"""
TemplateWriter — converts a Pattern into numbered pattern prose.

Pipeline:
  1. Renders a header line naming the sphere size and gauge.
  2. Builds one structured Instruction per round (build_instructions).
  3. Translates each Instruction to prose via templates.

All lines are joined into full_pattern in knitting order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sphereknit.schemas.pattern import Pattern
from sphereknit.writer.instructions import Instruction, build_instructions
from sphereknit.writer.templates import render_instruction


@dataclass(frozen=True)
class WriterInput:
    """Complete input bundle for the TemplateWriter."""

    pattern: Pattern


@dataclass(frozen=True)
class WriterOutput:
    """Output of a successful pattern write."""

    header: str
    instructions: tuple[Instruction, ...]
    lines: tuple[str, ...]  # one per instruction, in knitting order
    full_pattern: str  # header and all lines joined with newlines


@runtime_checkable
class PatternWriter(Protocol):
    """Protocol for pattern writers."""

    def write(self, writer_input: WriterInput) -> WriterOutput: ...


def render_header(pattern: Pattern) -> str:
    """Describe the sphere and gauge a pattern was computed for."""
    spec = pattern.spec
    unit = spec.unit.label
    return (
        f"Sphere, {spec.diameter.value:g} {unit} diameter "
        f"(gauge: {spec.gauge.stitches_per_unit:g} sts and "
        f"{spec.gauge.rows_per_unit:g} rows per {unit}; "
        f"{pattern.total_rows} rounds)"
    )


class TemplateWriter:
    """Deterministic template-based writer."""

    def write(self, wi: WriterInput) -> WriterOutput:
        """
        Convert a Pattern into pattern prose.

        Parameters
        ----------
        wi:
            WriterInput bundle holding the Pattern.

        Returns
        -------
        WriterOutput
            Header, structured instructions, per-round lines and the full text.
        """
        header = render_header(wi.pattern)
        instructions = build_instructions(wi.pattern)
        lines = tuple(render_instruction(ins) for ins in instructions)
        full_pattern = "\n".join((header, *lines))
        return WriterOutput(
            header=header,
            instructions=instructions,
            lines=lines,
            full_pattern=full_pattern,
        )
