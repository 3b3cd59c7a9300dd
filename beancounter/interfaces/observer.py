"""Step observer interface for read-only collaborators of the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from beancounter.interfaces.machine import IBeanMachine


class StepObserver(Protocol):
    """Anything that wants to look at the machine after each step.

    Observers may also define ``reset()``; the engine calls it whenever the
    machine is reset or repeated.
    """

    def on_step(self, machine: IBeanMachine, changed: bool) -> None:
        """Called once after every advance_step with its result."""
        ...
