import argparse
import sys
from pathlib import Path
from typing import Optional

# Ensure local repo package is used even if another "beancounter" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from beancounter import BeanMode, SimulationEngine, create_beans, create_machine, create_random_source


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a skill experiment, keep the upper half and rerun with that many beans."
    )
    parser.add_argument("--beans", type=int, default=400, help="Number of beans")
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="How many upper-half rounds to run",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser.parse_args()


def print_histogram(counts: list[int]) -> None:
    for index, count in enumerate(counts):
        print(f"{index:2d} | {'#' * (count // 4)} {count}")


def run_rounds(beans: int, rounds: int, seed: Optional[int] = None) -> list[list[int]]:
    """Run the experiment and return the slot counts of every round.

    Skill beans spend their right moves on the way down, so each round is
    loaded with fresh skill beans (as many as upper_half kept) instead of
    recycling the spent ones with repeat().
    """
    rng = create_random_source(seed)
    machine = create_machine(rng=rng)
    engine = SimulationEngine()
    engine.reset(machine, create_beans(beans, BeanMode.SKILL, rng=rng, slot_count=machine.slot_count))

    results = []
    for round_no in range(rounds):
        steps = engine.run(machine)
        counts = machine.get_slot_bean_counts()
        results.append(counts)
        print(
            f"Round {round_no}: {machine.slotted_bean_count} beans, {steps} steps, "
            f"average slot {machine.get_average_slot_index():.2f}"
        )
        print_histogram(counts)

        machine.upper_half()
        engine.reset(
            machine,
            create_beans(
                machine.slotted_bean_count,
                BeanMode.SKILL,
                rng=rng,
                slot_count=machine.slot_count,
            ),
        )
    return results


def main() -> None:
    args = parse_args()
    run_rounds(args.beans, args.rounds, args.seed)


if __name__ == "__main__":
    main()
