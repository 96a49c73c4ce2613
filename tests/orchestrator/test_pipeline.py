"""Tests for orchestrator.pipeline — SphereEngine, compute, PatternResult."""

from __future__ import annotations

import math

import pytest

from sphereknit.errors import InvalidSpec, OverconstrainedShaping, UnshapableSpec
from sphereknit.orchestrator.pipeline import PatternResult, SphereEngine, compute
from sphereknit.schemas.sphere import SphereSpec
from sphereknit.settings.registry import EngineSettings

# ── Shared fixtures ────────────────────────────────────────────────────────────

_SPEC = SphereSpec.from_values(10.0, "cm", 4.0, 5.0)
# First-try N = 22 needs 7 increases on the 6-stitch round after the pole;
# N = 20 needs 7 on 7, which fits.
_RETRY_SPEC = SphereSpec.from_values(2.0, "in", 7.16, 7.0)
# Far more stitches than rows: the round after the cast-on ring needs ~60
# increases on 6 stitches whatever the round count.
_UNSHAPABLE_SPEC = SphereSpec.from_values(10.0, "in", 20.0, 2.0)


class FlakyEngine(SphereEngine):
    """Fails the first *failures* attempts, then behaves normally."""

    def __init__(self, failures: int, settings: EngineSettings | None = None) -> None:
        super().__init__(settings)
        self.failures = failures
        self.tried: list[int] = []

    def attempt(self, spec, n):
        self.tried.append(n)
        if len(self.tried) <= self.failures:
            raise OverconstrainedShaping(1, 6, 99)
        return super().attempt(spec, n)


# ── SphereEngine.run ───────────────────────────────────────────────────────────


class TestSphereEngineRun:
    def test_first_try(self):
        pattern = SphereEngine().run(_SPEC)
        assert pattern.round_count == 78
        assert pattern.attempts == 1
        assert pattern.spec == _SPEC

    def test_equator_has_most_stitches(self):
        counts = SphereEngine().run(_SPEC).stitch_counts
        assert max(counts) == 126
        assert counts[39] == 126

    def test_equator_round_is_at_half_pi(self):
        spec = SphereSpec.from_values(10.0, "cm", 2.5, 2.5)
        pattern = SphereEngine().run(spec)
        middle = pattern.round_count // 2
        assert pattern.round_count == 40
        assert pattern.rounds[middle].polar_angle == math.pi / 2
        assert max(pattern.stitch_counts) == pattern.stitch_counts[middle] == 79

    def test_retries_with_one_fewer_round_per_hemisphere(self):
        pattern = SphereEngine().run(_RETRY_SPEC)
        assert pattern.round_count == 20
        assert pattern.attempts == 2

    def test_retry_walks_down_round_counts(self):
        engine = FlakyEngine(failures=2)
        pattern = engine.run(_SPEC)
        assert engine.tried == [78, 76, 74]
        assert pattern.round_count == 74
        assert pattern.attempts == 3

    def test_unshapable_after_budget(self):
        with pytest.raises(UnshapableSpec) as excinfo:
            SphereEngine().run(_UNSHAPABLE_SPEC)
        err = excinfo.value
        assert err.attempts == 5
        assert err.last_round_count == 24
        assert err.stage == "engine"
        assert "cannot be shaped" in str(err)

    def test_budget_from_settings(self):
        engine = FlakyEngine(failures=10, settings=EngineSettings(max_shaping_attempts=3))
        with pytest.raises(UnshapableSpec) as excinfo:
            engine.run(_SPEC)
        assert engine.tried == [78, 76, 74]
        assert excinfo.value.last_round_count == 74

    def test_never_below_two_segments(self):
        small = SphereSpec.from_values(0.5, "in", 1.0, 5.0)
        engine = FlakyEngine(failures=10)
        with pytest.raises(UnshapableSpec):
            engine.run(small)
        assert engine.tried == [4, 2]

    def test_closure_count_from_settings(self):
        pattern = SphereEngine(EngineSettings(closure_stitch_count=8)).run(_SPEC)
        assert pattern.stitch_counts[0] == pattern.stitch_counts[-1] == 8

    def test_staggered_pattern_keeps_counts(self):
        plain = SphereEngine().run(_SPEC)
        staggered = SphereEngine(EngineSettings(stagger_shaping=True)).run(_SPEC)
        assert staggered.stitch_counts == plain.stitch_counts
        assert staggered != plain


# ── compute ────────────────────────────────────────────────────────────────────


class TestCompute:
    def test_success(self):
        result = compute(_SPEC)
        assert result.ok
        assert result.pattern is not None
        assert result.error is None

    def test_unshapable_is_returned(self):
        result = compute(_UNSHAPABLE_SPEC)
        assert not result.ok
        assert result.pattern is None
        assert isinstance(result.error, UnshapableSpec)

    def test_idempotent(self):
        assert compute(_SPEC) == compute(_SPEC)

    def test_result_is_frozen(self):
        result = PatternResult(error=InvalidSpec("x"))
        with pytest.raises(AttributeError):
            result.error = None  # type: ignore[misc]


# ── Limits ─────────────────────────────────────────────────────────────────────


class TestLimits:
    def test_too_many_rounds(self):
        """1e6 in at 1000 rows/in is about 1.6e9 rounds."""
        huge = SphereSpec.from_values(1e6, "in", 1.0, 1e3)
        with pytest.raises(InvalidSpec, match="rounds exceeds the limit of 2000"):
            SphereEngine().run(huge)

    def test_too_many_stitches(self):
        """π × 10 × 1000 = 31416 stitches at the equator."""
        wide = SphereSpec.from_values(10.0, "in", 1000.0, 5.0)
        with pytest.raises(InvalidSpec, match="stitches at the equator exceeds the limit"):
            SphereEngine().run(wide)

    def test_limits_from_settings(self):
        engine = SphereEngine(EngineSettings(max_round_count=50))
        with pytest.raises(InvalidSpec, match="78 rounds exceeds the limit of 50"):
            engine.run(_SPEC)

    def test_checked_before_any_attempt(self):
        engine = FlakyEngine(failures=0, settings=EngineSettings(max_stitch_count=100))
        with pytest.raises(InvalidSpec):
            engine.run(_SPEC)
        assert engine.tried == []

    def test_compute_returns_limit_errors(self):
        result = compute(SphereSpec.from_values(1e6, "in", 1.0, 1e3))
        assert not result.ok
        assert isinstance(result.error, InvalidSpec)
