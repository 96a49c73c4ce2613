"""
SphereEngine — wires the full pipeline from SphereSpec to a checked Pattern.

Pipeline stages (per attempt):

  1. round_count_for() / retry budget  → segment count N for this attempt
  2. sample_rounds()                    → N+1 rounds with geometry
  3. convert_rounds()                   → stitch and row counts per round
  4. plan_shaping()                     → OverconstrainedShaping on failure
  5. check_pattern()                    → reconciliation gate

Round counts are always even so the equator gets a round of its own. Before
the first attempt the engine rejects specs whose round count or equator
stitch count exceed the configured limits (InvalidSpec).

Retry logic: if stage 4 raises OverconstrainedShaping or stage 5 reports
errors, the attempt is discarded and the pipeline re-runs with one fewer
round per hemisphere (two fewer overall). The loop is bounded by
``max_shaping_attempts`` and never goes below two segments; when it runs
out, UnshapableSpec is raised carrying the last round count tried.

compute() is the non-raising entry point: it returns a PatternResult holding
either the Pattern or the EngineError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sphereknit.checker.reconcile import check_pattern
from sphereknit.errors import EngineError, InvalidSpec, OverconstrainedShaping, UnshapableSpec
from sphereknit.gauge.converter import convert_rounds, equator_stitch_count
from sphereknit.geometry.sampler import round_count_for, sample_rounds
from sphereknit.planner.shaping_planner import plan_shaping
from sphereknit.schemas.pattern import Pattern, PatternEntry
from sphereknit.schemas.sphere import SphereSpec
from sphereknit.settings.registry import EngineSettings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternResult:
    """Outcome of one pattern request.

    Exactly one of ``pattern`` and ``error`` is set.
    """

    pattern: Pattern | None = None
    error: EngineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SphereEngine:
    """
    Deterministic sphere pattern engine.

    Holds only its settings; every run() is an independent pure computation,
    so one engine can serve any number of requests.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def attempt(self, spec: SphereSpec, n: int) -> tuple[PatternEntry, ...]:
        """Run the sample → convert → plan stages for a fixed segment count *n*.

        Raises:
            OverconstrainedShaping: If shaping cannot be placed singly.
        """
        rounds = sample_rounds(spec, n)
        rounds = convert_rounds(rounds, spec, self.settings.closure_stitch_count)
        return plan_shaping(rounds, staggered=self.settings.stagger_shaping)

    def check_limits(self, spec: SphereSpec, n: int) -> None:
        """Raise InvalidSpec if *n* rounds or the equator exceed the settings' limits."""
        if n > self.settings.max_round_count:
            raise InvalidSpec(
                f"{n} rounds exceeds the limit of {self.settings.max_round_count}; "
                f"use a smaller diameter or a coarser row gauge"
            )
        widest = equator_stitch_count(spec)
        if widest > self.settings.max_stitch_count:
            raise InvalidSpec(
                f"{widest} stitches at the equator exceeds the limit of "
                f"{self.settings.max_stitch_count}; use a smaller diameter or a coarser "
                f"stitch gauge"
            )

    def run(self, spec: SphereSpec) -> Pattern:
        """Execute the pipeline and return a validated Pattern.

        Parameters
        ----------
        spec:
            The sphere and gauge to knit.

        Returns
        -------
        Pattern
            Rounds pole to pole with their incoming shaping, already checked
            against the reconciliation invariant.

        Raises
        ------
        InvalidSpec
            If the sphere needs more rounds or stitches than the settings allow.
        UnshapableSpec
            If no round count within the retry budget can be shaped.
        """
        start = round_count_for(spec)
        self.check_limits(spec, start)
        last_tried = start
        reason = ""
        attempts = 0

        stop = max(0, start - 2 * self.settings.max_shaping_attempts)
        for n in range(start, stop, -2):
            attempts += 1
            last_tried = n
            logger.debug("attempt %d: %d segments for %s", attempts, n, spec)

            try:
                entries = self.attempt(spec, n)
            except OverconstrainedShaping as exc:
                logger.info("%d segments cannot be shaped (%s); retrying with fewer", n, exc.detail)
                reason = exc.detail
                continue

            result = check_pattern(entries)
            if not result.passed:
                reason = "; ".join(str(e) for e in result.errors)
                logger.warning("%d segments failed reconciliation: %s", n, reason)
                continue

            return Pattern(spec=spec, entries=entries, attempts=attempts)

        raise UnshapableSpec(last_round_count=last_tried, attempts=attempts, reason=reason)


def compute(spec: SphereSpec, settings: EngineSettings | None = None) -> PatternResult:
    """Compute the pattern for *spec*, returning errors as values."""
    try:
        return PatternResult(pattern=SphereEngine(settings).run(spec))
    except EngineError as exc:
        return PatternResult(error=exc)
