"""
Error taxonomy for the sphere pattern engine.

Every error carries the name of the stage that produced it and a
human-readable detail string, so callers can show a useful message without
parsing exception text.

  - InvalidSpec            — bad user input, raised at construction time
  - OverconstrainedShaping — internal; the engine retries with fewer rounds
  - UnshapableSpec         — retries exhausted; surfaced to the caller
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine failures.

    Attributes:
        stage: Name of the stage that failed
            (``"spec"``, ``"planner"``, ``"checker"``, or ``"engine"``).
        detail: Human-readable description of the failure.
    """

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"[{stage}] {detail}")
        self.stage = stage
        self.detail = detail


class InvalidSpec(EngineError, ValueError):
    """Diameter or gauge is not a usable positive value."""

    def __init__(self, detail: str) -> None:
        super().__init__("spec", detail)


class OverconstrainedShaping(EngineError):
    """More shaping operations are needed than there are stitches to place them on."""

    def __init__(self, round_index: int, stitches_before: int, delta: int) -> None:
        super().__init__(
            "planner",
            f"round {round_index}: cannot change {stitches_before} stitches by {delta:+d} "
            f"with single operations",
        )
        self.round_index = round_index
        self.stitches_before = stitches_before
        self.delta = delta


class UnshapableSpec(EngineError):
    """No round count within the retry budget produced a valid pattern."""

    def __init__(self, last_round_count: int, attempts: int, reason: str = "") -> None:
        detail = (
            f"this combination of diameter and gauge cannot be shaped "
            f"(last tried {last_round_count} rounds after {attempts} attempts)"
        )
        if reason:
            detail += f": {reason}"
        super().__init__("engine", detail)
        self.last_round_count = last_round_count
        self.attempts = attempts
        self.reason = reason
