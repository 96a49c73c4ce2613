"""
sphereknit — round-by-round knitting patterns for spheres.

Feed a diameter and a gauge to generate_pattern() and hand the resulting
Pattern to a TemplateWriter for prose.
"""

from sphereknit.api.generate import convert_spec, generate_pattern
from sphereknit.errors import EngineError, InvalidSpec, OverconstrainedShaping, UnshapableSpec
from sphereknit.orchestrator.pipeline import PatternResult, SphereEngine, compute
from sphereknit.schemas.pattern import Pattern, PatternEntry, ShapingEvent
from sphereknit.schemas.sphere import Round, SphereSpec
from sphereknit.utilities.types import Gauge, Measurement, Unit

__all__ = [
    "convert_spec",
    "generate_pattern",
    "compute",
    "SphereEngine",
    "PatternResult",
    "EngineError",
    "InvalidSpec",
    "OverconstrainedShaping",
    "UnshapableSpec",
    "Pattern",
    "PatternEntry",
    "ShapingEvent",
    "Round",
    "SphereSpec",
    "Gauge",
    "Measurement",
    "Unit",
]
