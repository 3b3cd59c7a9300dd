"""Bean machine abstraction - behavioral contract.

A bean machine owns the peg grid, the slots and the backlog of beans that
have not been dropped yet. Presentation layers (text or graphical) only
drive it through reset/repeat/advance_step and read it through the
accessors below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from beancounter.core.bean import Bean


class IBeanMachine(ABC):
    """Interface of a Galton box simulation."""

    @property
    @abstractmethod
    def slot_count(self) -> int:
        """Number of terminal slots."""
        ...

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of peg rows (slot_count - 1)."""
        ...

    @property
    @abstractmethod
    def total_bean_count(self) -> int:
        """Beans owned by the machine since the last reset/repeat."""
        ...

    @abstractmethod
    def reset(self, beans: Iterable[Bean]) -> None:
        """Replace the bean population and drop the first bean."""
        ...

    @abstractmethod
    def repeat(self) -> None:
        """Scoop up all slotted and in-flight beans and start again."""
        ...

    @abstractmethod
    def advance_step(self) -> bool:
        """Move every in-flight bean one row; return whether anything changed."""
        ...

    @abstractmethod
    def get_in_flight_bean_x_pos(self, row: int) -> Optional[int]:
        """Column of the in-flight bean on row, or None."""
        ...

    @abstractmethod
    def get_slot_bean_count(self, index: int) -> int:
        """Number of beans in slot index."""
        ...

    @abstractmethod
    def get_average_slot_index(self) -> float:
        """Population-weighted mean slot index."""
        ...

    @abstractmethod
    def get_remaining_bean_count(self) -> int:
        """Number of beans still waiting in the backlog."""
        ...

    @abstractmethod
    def upper_half(self) -> None:
        """Keep only the upper half of slotted beans."""
        ...

    @abstractmethod
    def lower_half(self) -> None:
        """Keep only the lower half of slotted beans."""
        ...

    @abstractmethod
    def check_invariants(self) -> None:
        """Raise InvariantViolationError if the state is inconsistent."""
        ...
