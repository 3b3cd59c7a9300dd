"""Text-mode front end.

Runs the machine with no bells and whistles and shows the slot bean
counts at the end:

    beancounter 400 luck
    beancounter 400 skill --seed 7 --check
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence, TextIO

from beancounter.core.bean_enums import BeanMode
from beancounter.core.builders import create_beans, create_machine, create_random_source
from beancounter.core.exceptions import ConfigurationError
from beancounter.core.invariants import InvariantChecker
from beancounter.core.simulation_engine import SimulationEngine
from beancounter.utils.config_loader import MachineConfig, get_config

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: beancounter <number of beans> <luck | skill>\n"
    "Example: beancounter 400 luck\n"
)


class UsageError(Exception):
    """Raised instead of exiting when the command line is malformed."""


class _UsageParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _bean_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise ValueError("bean count must be >= 0")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="beancounter",
        description="Drop beans through a Galton box and print the slot counts.",
    )
    parser.add_argument("beans", type=_bean_count, help="Number of beans (>= 0)")
    parser.add_argument(
        "mode",
        choices=[mode.value for mode in BeanMode],
        help="Fall policy of every bean",
    )
    parser.add_argument(
        "--slots",
        type=int,
        default=None,
        help="Number of slots (defaults to machine.slot_count from the config)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--config", default=None, help="Path to a YAML config")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate machine invariants after every step",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    try:
        args = build_parser().parse_args(argv)
    except UsageError:
        out.write(USAGE)
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    try:
        cfg = get_config(args.config)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    if args.slots is not None:
        if args.slots < 1:
            out.write(USAGE)
            return 0
        cfg = replace(cfg, machine=MachineConfig(slot_count=args.slots))

    rng = create_random_source(args.seed)
    machine = create_machine(cfg, rng=rng)
    beans = create_beans(
        args.beans,
        BeanMode(args.mode),
        rng=rng,
        slot_count=cfg.machine.slot_count,
        skill=cfg.skill,
    )

    engine = SimulationEngine([InvariantChecker()] if args.check else None)
    engine.reset(machine, beans)
    engine.run(machine)

    out.write("Slot bean counts:\n")
    out.write(" ".join(str(count) for count in machine.get_slot_bean_counts()) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
