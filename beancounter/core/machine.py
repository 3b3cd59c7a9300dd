"""Core logic of the bean counter machine.

The bean counter, also known as a quincunx or the Galton box, is an
upright board with evenly spaced pegs in a triangular form. Beans are
dropped from the opening at the top; every time a bean hits a peg it
falls to the left or to the right, and the beans pile up in the slots at
the bottom of the board.

Each call to advance_step() is one atomic transition:

1. every in-flight bean, bottom row first, falls one row (or into a slot
   when it leaves the last row of pegs);
2. one bean from the backlog is dropped onto the top peg.

With a single slot there are no pegs and beans go straight into slot 0.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterable, List, Optional

from beancounter.core.bean import Bean
from beancounter.core.bean_enums import BeanMode
from beancounter.core.exceptions import (
    InvariantViolationError,
    PegPositionError,
    SlotIndexError,
)
from beancounter.core.peg_grid import PegGrid
from beancounter.interfaces.machine import IBeanMachine

if TYPE_CHECKING:
    from beancounter.interfaces.random_source import RandomSource

logger = logging.getLogger(__name__)


class BeanCounterLogic(IBeanMachine):
    """Galton box state machine: peg grid, slots and backlog."""

    def __init__(self, slot_count: int, rng: Optional["RandomSource"] = None):
        if slot_count < 1:
            raise ValueError("slot_count must be >= 1")
        self._slot_count = slot_count
        self._pegs = PegGrid(slot_count - 1)
        self._slots: List[List[Bean]] = [[] for _ in range(slot_count)]
        self._backlog: Deque[Bean] = deque()
        self._total = 0

        # The machine starts with a single bean at the top.
        seed_rng = rng if rng is not None else random.Random()
        self.reset([Bean(BeanMode.LUCK, seed_rng, slot_count=slot_count)])

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def slot_count(self) -> int:
        return self._slot_count

    @property
    def rows(self) -> int:
        return self._pegs.rows

    @property
    def pegs(self) -> PegGrid:
        return self._pegs

    @property
    def slots(self) -> List[List[Bean]]:
        return self._slots

    @property
    def backlog(self) -> Deque[Bean]:
        return self._backlog

    @property
    def total_bean_count(self) -> int:
        return self._total

    @property
    def in_flight_bean_count(self) -> int:
        return self._pegs.occupied_count()

    @property
    def slotted_bean_count(self) -> int:
        return sum(len(slot) for slot in self._slots)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_remaining_bean_count(self) -> int:
        return len(self._backlog)

    def get_in_flight_bean_x_pos(self, row: int) -> Optional[int]:
        """Return the column of the in-flight bean on row, or None.

        Rows run from 0 to slot_count - 1; the last one is the slot level,
        which never holds an in-flight bean.
        """
        if not 0 <= row < self._slot_count:
            raise PegPositionError(row, rows=self._pegs.rows)
        if row >= self._pegs.rows:
            return None
        return self._pegs.column_of(row)

    def _validate_slot(self, index: int) -> None:
        if not 0 <= index < self._slot_count:
            raise SlotIndexError(index, self._slot_count)

    def get_slot_bean_count(self, index: int) -> int:
        self._validate_slot(index)
        return len(self._slots[index])

    def get_slot_bean_counts(self) -> List[int]:
        return [len(slot) for slot in self._slots]

    def get_average_slot_index(self) -> float:
        slotted = self.slotted_bean_count
        if slotted == 0:
            return 0.0
        weighted = sum(index * len(slot) for index, slot in enumerate(self._slots))
        return weighted / slotted

    def is_quiescent(self) -> bool:
        """True when no bean is in flight and the backlog is empty."""
        return not self._backlog and self.in_flight_bean_count == 0

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _drop_next(self) -> bool:
        """Move one backlog bean onto the top peg (or the sole slot)."""
        if not self._backlog:
            return False
        bean = self._backlog.popleft()
        if self._pegs.rows == 0:
            self._slots[0].append(bean)
        else:
            self._pegs.place(0, 0, bean)
        return True

    def reset(self, beans: Iterable[Bean]) -> None:
        """Hard reset with the given beans; the first one starts at the top."""
        self._backlog = deque(beans)
        self._total = len(self._backlog)
        self._pegs.clear()
        for slot in self._slots:
            slot.clear()
        self._drop_next()
        logger.debug(
            "Reset %d-slot machine with %d beans", self._slot_count, self._total
        )

    def repeat(self) -> None:
        """Scoop every bean back into the backlog and start over.

        Beans already waiting keep their place at the front, followed by the
        slotted beans (slot 0 first, in arrival order), then the in-flight
        beans from the top row down.
        """
        recovered: List[Bean] = list(self._backlog)
        for slot in self._slots:
            recovered.extend(slot)
        recovered.extend(bean for _, _, bean in self._pegs.occupied())
        logger.debug("Repeating experiment with %d recovered beans", len(recovered))
        self.reset(recovered)

    def advance_step(self) -> bool:
        """Advance the machine one step.

        Returns:
            Whether any bean moved or was dropped. False means the machine
            is finished.
        """
        changed = False
        last_row = self._pegs.rows - 1

        # Bottom-up so a bean moved into row y + 1 is not moved again.
        for row in range(last_row, -1, -1):
            column = self._pegs.column_of(row)
            if column is None:
                continue
            bean = self._pegs.take(row, column)
            target = column + bean.fall()
            changed = True
            if row == last_row:
                self._slots[target].append(bean)
            else:
                self._pegs.place(row + 1, target, bean)

        if self._drop_next():
            changed = True
        return changed

    # ------------------------------------------------------------------
    # Population filtering
    # ------------------------------------------------------------------

    def _discard_half(self, slot_order: Iterable[int]) -> int:
        to_remove = self.slotted_bean_count // 2
        removed = 0
        for index in slot_order:
            slot = self._slots[index]
            while slot and removed < to_remove:
                slot.pop(0)
                removed += 1
            if removed == to_remove:
                break
        self._total -= removed
        return removed

    def upper_half(self) -> None:
        """Remove the lower half of slotted beans, keeping the upper half."""
        removed = self._discard_half(range(self._slot_count))
        logger.debug("upper_half discarded %d beans", removed)

    def lower_half(self) -> None:
        """Remove the upper half of slotted beans, keeping the lower half."""
        removed = self._discard_half(range(self._slot_count - 1, -1, -1))
        logger.debug("lower_half discarded %d beans", removed)

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def check_invariants(self) -> None:
        rows_seen = set()
        for row, column, _ in self._pegs.occupied():
            if not 0 <= column <= row < self._pegs.rows:
                raise InvariantViolationError(
                    "coordinate-legality",
                    f"bean at illegal position ({row}, {column})",
                    details={"row": row, "column": column},
                )
            if row in rows_seen:
                raise InvariantViolationError(
                    "one-bean-per-row",
                    f"more than one in-flight bean on row {row}",
                    details={"row": row},
                )
            rows_seen.add(row)

        in_flight = len(rows_seen)
        counted = len(self._backlog) + in_flight + self.slotted_bean_count
        if counted != self._total:
            raise InvariantViolationError(
                "conservation",
                f"counted {counted} beans, expected {self._total}",
                details={
                    "remaining": len(self._backlog),
                    "in_flight": in_flight,
                    "slotted": self.slotted_bean_count,
                    "total": self._total,
                },
            )
