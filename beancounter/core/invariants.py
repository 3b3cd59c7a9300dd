"""Step observer that checks machine invariants after every step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beancounter.core.exceptions import InvariantViolationError

if TYPE_CHECKING:
    from beancounter.interfaces.machine import IBeanMachine


class InvariantChecker:
    """Validates the machine after each step.

    Checks everything IBeanMachine.check_invariants() covers, plus
    idempotent quiescence: once a step reports no change, no later step
    may report one until the machine is reset or repeated.
    """

    def __init__(self):
        self._finished = False
        self.steps_checked = 0

    @property
    def finished(self) -> bool:
        return self._finished

    def on_step(self, machine: "IBeanMachine", changed: bool) -> None:
        machine.check_invariants()
        if self._finished and changed:
            raise InvariantViolationError(
                "idempotent-quiescence",
                "machine changed after it had finished",
                details={"steps_checked": self.steps_checked},
            )
        if not changed:
            self._finished = True
        self.steps_checked += 1

    def reset(self) -> None:
        self._finished = False
        self.steps_checked = 0
