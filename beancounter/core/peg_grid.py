"""Triangular peg grid holding in-flight beans.

The grid uses a logical coordinate system of (row, column) pairs. For a
4-slot machine there are 3 rows of pegs:

                     (0, 0)
              (1, 0)        (1, 1)
       (2, 0)        (2, 1)        (2, 2)
    [Slot0]      [Slot1]       [Slot2]      [Slot3]

Rows are stored as a jagged list, row y holding y + 1 cells, so no flat
index arithmetic is needed. Each cell holds at most one bean.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from beancounter.core.exceptions import InvariantViolationError, PegPositionError
from beancounter.utils.consts import triangular_number

if TYPE_CHECKING:
    from beancounter.core.bean import Bean


class PegGrid:
    """Jagged array-of-rows of optional beans."""

    def __init__(self, rows: int):
        if rows < 0:
            raise ValueError("rows must be >= 0")
        self._rows = rows
        self._cells: List[List[Optional["Bean"]]] = [
            [None] * (y + 1) for y in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    def __len__(self) -> int:
        """Total number of cells (a triangular number)."""
        return triangular_number(self._rows)

    def _validate(self, row: int, column: int) -> None:
        if not (0 <= column <= row < self._rows):
            raise PegPositionError(row, column, rows=self._rows)

    def get(self, row: int, column: int) -> Optional["Bean"]:
        self._validate(row, column)
        return self._cells[row][column]

    def __getitem__(self, position: Tuple[int, int]) -> Optional["Bean"]:
        row, column = position
        return self.get(row, column)

    def place(self, row: int, column: int, bean: "Bean") -> None:
        """Put a bean on an empty cell."""
        self._validate(row, column)
        if self._cells[row][column] is not None:
            raise InvariantViolationError(
                "one-bean-per-cell",
                f"cell ({row}, {column}) is already occupied",
                details={"row": row, "column": column},
            )
        self._cells[row][column] = bean

    def take(self, row: int, column: int) -> "Bean":
        """Remove and return the bean on an occupied cell."""
        self._validate(row, column)
        bean = self._cells[row][column]
        if bean is None:
            raise InvariantViolationError(
                "occupied-cell",
                f"cell ({row}, {column}) is empty",
                details={"row": row, "column": column},
            )
        self._cells[row][column] = None
        return bean

    def column_of(self, row: int) -> Optional[int]:
        """Column of the first occupied cell in row, or None."""
        if not 0 <= row < self._rows:
            raise PegPositionError(row, rows=self._rows)
        for column, bean in enumerate(self._cells[row]):
            if bean is not None:
                return column
        return None

    def occupied(self) -> Iterator[Tuple[int, int, "Bean"]]:
        """Yield (row, column, bean) for every occupied cell, top row first."""
        for row, cells in enumerate(self._cells):
            for column, bean in enumerate(cells):
                if bean is not None:
                    yield row, column, bean

    def occupied_count(self) -> int:
        return sum(1 for _ in self.occupied())

    def clear(self) -> List["Bean"]:
        """Empty every cell and return the removed beans in grid order."""
        removed = [bean for _, _, bean in self.occupied()]
        for cells in self._cells:
            for column in range(len(cells)):
                cells[column] = None
        return removed
