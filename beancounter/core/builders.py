"""Factories for bean populations and configured machines.

These encode the common setup every front end repeats: pick a random
source, create N beans of one mode, and build a machine sized from the
configuration.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional

from beancounter.core.bean import Bean
from beancounter.core.machine import BeanCounterLogic
from beancounter.utils.config_loader import BeanCounterConfig, SkillConfig, get_config
from beancounter.utils.consts import ConstUtils

if TYPE_CHECKING:
    from beancounter.core.bean_enums import BeanMode
    from beancounter.interfaces.random_source import RandomSource


def create_random_source(seed: Optional[int] = None) -> random.Random:
    """Create an independent random source, seeded when seed is given."""
    return random.Random(seed)


def create_beans(
    count: int,
    mode: "BeanMode",
    rng: Optional["RandomSource"] = None,
    slot_count: int = ConstUtils.DEFAULT_SLOT_COUNT,
    skill: Optional[SkillConfig] = None,
) -> List[Bean]:
    """Create count beans sharing one random source.

    Args:
        count: Number of beans (>= 0)
        mode: Luck or skill
        rng: Random source; a fresh unseeded one is used if omitted
        slot_count: Machine size the skill distribution is scaled to
        skill: Skill distribution factors; defaults to ConstUtils values

    Returns:
        List of beans in creation order
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    rng = rng if rng is not None else create_random_source()
    skill = skill or SkillConfig()
    return [
        Bean(
            mode,
            rng,
            slot_count=slot_count,
            mean_factor=skill.mean_factor,
            variance_factor=skill.variance_factor,
        )
        for _ in range(count)
    ]


def create_machine(
    config: Optional[BeanCounterConfig] = None,
    rng: Optional["RandomSource"] = None,
) -> BeanCounterLogic:
    """Create a machine sized from config (the bundled one if omitted)."""
    cfg = config or get_config()
    return BeanCounterLogic(cfg.machine.slot_count, rng=rng)
