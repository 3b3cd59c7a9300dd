"""Constants and utility values for the bean counter."""

from __future__ import annotations

import math


class ConstUtils:
    """Machine defaults and skill distribution parameters."""

    DEFAULT_SLOT_COUNT = 10
    """Slot count used by the reference CLI and the bundled config."""

    SKILL_MEAN_FACTOR = 0.5
    """Skill mean is slot_count * SKILL_MEAN_FACTOR."""

    SKILL_VARIANCE_FACTOR = 0.25
    """Skill variance is slot_count * SKILL_VARIANCE_FACTOR (p * (1 - p) for p = 0.5)."""

    SKILL_THRESHOLD_OFFSET = 0.5
    """Skill level k covers samples in [k - 0.5, k + 0.5)."""


def triangular_number(n: int) -> int:
    """Number of pegs in a triangular grid with n rows."""
    return n * (n + 1) // 2


def skill_stdev(slot_count: int, variance_factor: float = ConstUtils.SKILL_VARIANCE_FACTOR) -> float:
    return math.sqrt(slot_count * variance_factor)


def skill_thresholds(max_level: int) -> list[float]:
    """Upper bounds of each skill bucket below max_level.

    For max_level 9 this is [0.5, 1.5, ..., 8.5]; a sample below the
    k-th threshold maps to level k, anything at or past the last one to
    max_level.
    """
    offset = ConstUtils.SKILL_THRESHOLD_OFFSET
    return [level + offset for level in range(max(max_level, 0))]
