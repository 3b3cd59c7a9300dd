import random

import pytest

from beancounter.core.bean import Bean
from beancounter.core.bean_enums import BeanMode
from beancounter.core.exceptions import InvariantViolationError
from beancounter.core.invariants import InvariantChecker
from beancounter.core.machine import BeanCounterLogic
from beancounter.core.simulation_engine import SimulationEngine


class StubMachine:
    def __init__(self):
        self.checks = 0

    def check_invariants(self) -> None:
        self.checks += 1


def test_checker_runs_machine_checks():
    machine = StubMachine()
    checker = InvariantChecker()

    checker.on_step(machine, True)
    checker.on_step(machine, False)

    assert machine.checks == 2
    assert checker.finished is True
    assert checker.steps_checked == 2


def test_checker_rejects_change_after_quiescence():
    checker = InvariantChecker()
    checker.on_step(StubMachine(), False)

    with pytest.raises(InvariantViolationError) as exc_info:
        checker.on_step(StubMachine(), True)
    assert exc_info.value.invariant == "idempotent-quiescence"


def test_checker_reset():
    checker = InvariantChecker()
    checker.on_step(StubMachine(), False)
    checker.reset()

    checker.on_step(StubMachine(), True)
    assert checker.finished is False
    assert checker.steps_checked == 1


@pytest.mark.parametrize("slot_count", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("bean_count", [0, 1, 2, 3])
@pytest.mark.parametrize("seed", range(4))
def test_small_machines_hold_invariants(slot_count, bean_count, seed):
    rng = random.Random(seed)
    machine = BeanCounterLogic(slot_count, rng=rng)
    checker = InvariantChecker()
    engine = SimulationEngine([checker])
    engine.reset(machine, [Bean(BeanMode.LUCK, rng, slot_count) for _ in range(bean_count)])

    steps = engine.run(machine, max_steps=bean_count + slot_count + 1)

    assert checker.finished is True
    assert steps == checker.steps_checked
    for row in range(slot_count):
        assert machine.get_in_flight_bean_x_pos(row) is None
    assert machine.get_remaining_bean_count() == 0
    assert machine.slotted_bean_count == bean_count

    # Still quiet on further steps
    for _ in range(3):
        engine.step(machine)


@pytest.mark.parametrize("mode", [BeanMode.LUCK, BeanMode.SKILL])
def test_full_size_machine_holds_invariants(mode):
    rng = random.Random(42)
    machine = BeanCounterLogic(10, rng=rng)
    checker = InvariantChecker()
    engine = SimulationEngine([checker])
    engine.reset(machine, [Bean(mode, rng) for _ in range(200)])

    engine.run(machine)
    machine.upper_half()
    engine.repeat(machine)
    engine.run(machine)

    assert machine.slotted_bean_count == 100
    assert machine.total_bean_count == 100
    if mode is BeanMode.SKILL:
        # Right moves are spent in the first run; repeat does not restore them.
        assert machine.get_slot_bean_counts()[0] == 100


def test_legal_positions_during_run():
    rng = random.Random(5)
    machine = BeanCounterLogic(6, rng=rng)
    machine.reset([Bean(BeanMode.LUCK, rng, 6) for _ in range(12)])

    while machine.advance_step():
        for row in range(machine.slot_count):
            column = machine.get_in_flight_bean_x_pos(row)
            assert column is None or 0 <= column <= row
