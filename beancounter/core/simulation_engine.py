"""Simulation engine for driving a bean machine to completion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from beancounter.core.bean import Bean
    from beancounter.interfaces.machine import IBeanMachine
    from beancounter.interfaces.observer import StepObserver

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Step driver with pub/sub notification of observers.

    This delegates the actual transitions to the machine's
    advance_step/reset/repeat methods.
    """

    def __init__(self, observers: Optional[Iterable["StepObserver"]] = None):
        self._observers: List["StepObserver"] = []
        self._step_count = 0
        for observer in observers or ():
            self.subscribe(observer)

    @property
    def step_count(self) -> int:
        """Steps taken since the last reset/repeat."""
        return self._step_count

    def subscribe(self, observer: "StepObserver") -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: "StepObserver") -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_reset(self) -> None:
        for observer in list(self._observers):
            reset_fn = getattr(observer, "reset", None)
            if callable(reset_fn):
                reset_fn()

    def step(self, machine: "IBeanMachine") -> bool:
        """Advance the machine by one step."""
        changed = machine.advance_step()
        self._step_count += 1
        for observer in list(self._observers):
            observer.on_step(machine, changed)
        return changed

    def run(self, machine: "IBeanMachine", max_steps: Optional[int] = None) -> int:
        """Step until the machine reports no change.

        Returns:
            Number of steps taken, including the final no-change step.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be >= 0")

        steps = 0
        while max_steps is None or steps < max_steps:
            steps += 1
            if not self.step(machine):
                logger.info("Machine finished after %d steps", steps)
                break
        return steps

    def reset(self, machine: "IBeanMachine", beans: Iterable["Bean"]) -> None:
        """Reset the machine with a new bean population."""
        machine.reset(beans)
        self._step_count = 0
        self._notify_reset()

    def repeat(self, machine: "IBeanMachine") -> None:
        """Recycle every bean in the machine and start again."""
        machine.repeat()
        self._step_count = 0
        self._notify_reset()
