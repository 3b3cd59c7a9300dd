"""Bean: a single particle falling through the peg grid.

Each bean decides left or right whenever it hits a peg. In luck mode the
decision is a fair coin flip. In skill mode the bean is assigned a skill
level once, at creation, from a normal distribution centred on the middle
of the machine; a bean of skill level k falls right k times and then left
for every remaining peg. With 10 slots a level 9 bean always lands in
slot 9, a level 0 bean in slot 0, and a level 7 bean goes right 7 times
then left twice.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING

from beancounter.core.bean_enums import BeanMode, FallDirection
from beancounter.utils.consts import ConstUtils, skill_stdev, skill_thresholds

if TYPE_CHECKING:
    from beancounter.interfaces.random_source import RandomSource


class Bean:
    """One bean with a fixed fall policy."""

    def __init__(
        self,
        mode: BeanMode,
        rng: "RandomSource",
        slot_count: int = ConstUtils.DEFAULT_SLOT_COUNT,
        mean_factor: float = ConstUtils.SKILL_MEAN_FACTOR,
        variance_factor: float = ConstUtils.SKILL_VARIANCE_FACTOR,
    ):
        if slot_count < 1:
            raise ValueError("slot_count must be >= 1")
        self._mode = mode
        self._rng = rng
        self._skill_level: int | None = None
        self._remaining_right_moves = 0

        if mode is BeanMode.SKILL:
            sample = rng.gauss(
                slot_count * mean_factor, skill_stdev(slot_count, variance_factor)
            )
            self._skill_level = self.bucket_skill(sample, max_level=slot_count - 1)
            self._remaining_right_moves = self._skill_level

    @staticmethod
    def bucket_skill(sample: float, max_level: int = ConstUtils.DEFAULT_SLOT_COUNT - 1) -> int:
        """Map a gaussian sample onto an integer skill level in [0, max_level]."""
        return bisect_right(skill_thresholds(max_level), sample)

    @property
    def mode(self) -> BeanMode:
        return self._mode

    @property
    def is_luck(self) -> bool:
        return self._mode is BeanMode.LUCK

    @property
    def skill_level(self) -> int | None:
        """Skill level drawn at creation; None for luck beans."""
        return self._skill_level

    @property
    def remaining_right_moves(self) -> int:
        return self._remaining_right_moves

    def fall(self) -> FallDirection:
        """Return the side this bean takes at the current peg."""
        if self._mode is BeanMode.LUCK:
            return FallDirection(self._rng.randrange(2))
        if self._remaining_right_moves > 0:
            self._remaining_right_moves -= 1
            return FallDirection.RIGHT
        return FallDirection.LEFT

    def __repr__(self) -> str:
        if self._mode is BeanMode.LUCK:
            return "Bean(mode=luck)"
        return (
            f"Bean(mode=skill, skill_level={self._skill_level}, "
            f"remaining_right_moves={self._remaining_right_moves})"
        )
