"""
Engine settings: loaded from YAML at startup, validated, and exposed
read-only.

The packaged defaults live in ``data/engine.yaml``. The module-level
singleton is built at import time; call get_settings() to obtain it, or
load_settings(path) to read an alternative file (e.g. from the CLI or a
test).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULT_FILE = _DATA_DIR / "engine.yaml"


@dataclass(frozen=True)
class EngineSettings:
    """
    Tunable engine parameters.

    Attributes:
        closure_stitch_count: Stitches in each pole closure round.
        max_shaping_attempts: Round counts tried before UnshapableSpec.
        stagger_shaping: Offset successive shaping rounds' operations.
        max_round_count: Largest pole-to-pole round count the engine will plan.
        max_stitch_count: Largest equator stitch count the engine will plan.
    """

    closure_stitch_count: int = 6
    max_shaping_attempts: int = 5
    stagger_shaping: bool = False
    max_round_count: int = 2000
    max_stitch_count: int = 10000

    def __post_init__(self) -> None:
        for name in (
            "closure_stitch_count",
            "max_shaping_attempts",
            "max_round_count",
            "max_stitch_count",
        ):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        if not isinstance(self.stagger_shaping, bool):
            raise ValueError(f"stagger_shaping must be a boolean, got {self.stagger_shaping!r}")


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Settings file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse settings file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping, got {type(data).__name__}")
    return cast(dict[str, Any], data)


def load_settings(path: Path | str = _DEFAULT_FILE) -> EngineSettings:
    """
    Read and validate an engine settings file.

    Keys missing from the file fall back to the EngineSettings defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid YAML, has unknown keys, or
            holds out-of-range values.
    """
    path = Path(path)
    data = _load_yaml(path)
    known = {f.name for f in fields(EngineSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {', '.join(unknown)}")
    return EngineSettings(**data)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time; the settings object is frozen, so sharing it
# across threads is safe.

_settings: EngineSettings = load_settings()


def get_settings() -> EngineSettings:
    """Return the packaged default settings."""
    return _settings
