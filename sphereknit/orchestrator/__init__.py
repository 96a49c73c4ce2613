from .pipeline import PatternResult, SphereEngine, compute

__all__ = ["PatternResult", "SphereEngine", "compute"]
