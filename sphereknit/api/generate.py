"""
Public sphere pattern generation API.

generate_pattern() is the single entry point a front end calls on every
edit: it takes the four raw form values and returns a PatternResult. It
wires the full pipeline: SphereSpec construction → SphereEngine
(sampler → converter → planner → checker).

Input errors are returned, not raised, so a UI can show them next to the
offending field without a try/except around every call.
"""

from __future__ import annotations

from sphereknit.errors import InvalidSpec
from sphereknit.orchestrator.pipeline import PatternResult, compute
from sphereknit.schemas.sphere import SphereSpec
from sphereknit.settings.registry import EngineSettings
from sphereknit.utilities.conversion import convert_gauge, convert_measurement
from sphereknit.utilities.types import Unit


def generate_pattern(
    diameter: float,
    unit: Unit | str,
    stitches_per_unit: float,
    rows_per_unit: float,
    settings: EngineSettings | None = None,
) -> PatternResult:
    """
    Generate a sphere pattern from a diameter and a gauge.

    Parameters
    ----------
    diameter:
        Sphere diameter, in *unit*.
    unit:
        ``Unit.INCH`` / ``Unit.CENTIMETER`` or a spelling ``Unit.parse``
        accepts (``"in"``, ``"cm"``, ...).
    stitches_per_unit:
        Stitch gauge, stitches per *unit*.
    rows_per_unit:
        Row gauge, rows per *unit*.
    settings:
        Engine settings; defaults to the packaged ``engine.yaml``.

    Returns
    -------
    PatternResult
        Always returned. ``error`` is an InvalidSpec for bad inputs and an
        UnshapableSpec when no round count can be shaped.
    """
    try:
        spec = SphereSpec.from_values(diameter, unit, stitches_per_unit, rows_per_unit)
    except InvalidSpec as exc:
        return PatternResult(error=exc)
    return compute(spec, settings)


def convert_spec(spec: SphereSpec, unit: Unit | str) -> SphereSpec:
    """Express *spec* (diameter and gauge together) in another unit."""
    target = Unit.parse(unit)
    return SphereSpec(
        diameter=convert_measurement(spec.diameter, target),
        gauge=convert_gauge(spec.gauge, target),
    )
