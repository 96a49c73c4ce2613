from .pattern import Pattern, PatternEntry, ShapingEvent
from .sphere import Round, SphereSpec

__all__ = ["Pattern", "PatternEntry", "ShapingEvent", "Round", "SphereSpec"]
