"""planner — Shaping Planner public API."""

from sphereknit.planner.shaping_planner import plan_event, plan_shaping

__all__ = ["plan_event", "plan_shaping"]
