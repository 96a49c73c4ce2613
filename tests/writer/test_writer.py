"""Tests for writer.writer — WriterInput, WriterOutput, TemplateWriter, PatternWriter."""

from __future__ import annotations

import pytest

from sphereknit.orchestrator.pipeline import SphereEngine
from sphereknit.schemas.sphere import SphereSpec
from sphereknit.settings.registry import EngineSettings
from sphereknit.writer.instructions import InstructionKind
from sphereknit.writer.writer import (
    PatternWriter,
    TemplateWriter,
    WriterInput,
    WriterOutput,
    render_header,
)

_SPEC = SphereSpec.from_values(10.0, "cm", 4.0, 5.0)


@pytest.fixture(scope="module")
def output() -> WriterOutput:
    pattern = SphereEngine().run(_SPEC)
    return TemplateWriter().write(WriterInput(pattern=pattern))


class TestTemplateWriter:
    def test_satisfies_protocol(self):
        assert isinstance(TemplateWriter(), PatternWriter)

    def test_one_line_per_round(self, output):
        assert len(output.lines) == 79
        assert len(output.instructions) == 79

    def test_header(self, output):
        assert output.header == (
            "Sphere, 10 cm diameter (gauge: 4 sts and 5 rows per cm; 79 rounds)"
        )

    def test_full_pattern_joins_header_and_lines(self, output):
        assert output.full_pattern.splitlines() == [output.header, *output.lines]

    def test_opening_rounds(self, output):
        assert output.lines[0] == "Round 1: Cast on 6 stitches and join to work in the round."
        assert output.lines[1] == "Round 2: Knit 1 plain round of 6 stitches."
        assert output.lines[2] == (
            "Round 3: k1, inc, k2, inc, k1, inc, k2, inc (4 inc, 10 sts total)."
        )
        assert output.lines[3] == "Round 4: *k2, inc; rep from * to end (5 inc, 15 sts total)."

    def test_closing_rounds(self, output):
        assert output.lines[-3] == (
            "Round 77: *k1, k2tog; rep from * to end (5 dec, 10 sts total)."
        )
        assert output.lines[-2] == (
            "Round 78: k2tog, k1, k2tog, k2tog, k1, k2tog (4 dec, 6 sts total)."
        )
        assert output.lines[-1] == (
            "Round 79: Knit 1 plain round of 6 stitches. "
            "Break yarn, draw through the remaining 6 stitches and pull tight."
        )

    def test_staggered_shaping_changes_the_text(self, output):
        settings = EngineSettings(stagger_shaping=True)
        staggered = TemplateWriter().write(WriterInput(pattern=SphereEngine(settings).run(_SPEC)))
        assert staggered.lines != output.lines
        # Round 4 works 5 increases on 10 stitches, shifted one stitch back.
        assert staggered.lines[3] == (
            "Round 4: k1, inc, [k2, inc] 4 times, k1 (5 inc, 15 sts total)."
        )

    def test_instruction_kinds_bracket_pattern(self, output):
        assert output.instructions[0].kind is InstructionKind.CAST_ON
        assert output.instructions[-1].kind is InstructionKind.CLOSE

    def test_rows_numbered_consecutively(self, output):
        rows = [i.first_row for i in output.instructions]
        assert rows == list(range(1, 80))

    def test_deterministic(self, output):
        again = TemplateWriter().write(WriterInput(pattern=SphereEngine().run(_SPEC)))
        assert again.full_pattern == output.full_pattern


class TestRenderHeader:
    def test_inches(self):
        pattern = SphereEngine().run(SphereSpec.from_values(4.0, "in", 5.0, 7.0))
        assert render_header(pattern).startswith("Sphere, 4 in diameter (gauge: 5 sts and 7 rows")
