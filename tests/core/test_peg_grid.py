import pytest

from beancounter.core.exceptions import BeanCounterError, InvariantViolationError, PegPositionError
from beancounter.core.peg_grid import PegGrid


def test_grid_size_is_triangular():
    assert len(PegGrid(0)) == 0
    assert len(PegGrid(3)) == 6
    assert len(PegGrid(9)) == 45


def test_negative_rows_rejected():
    with pytest.raises(ValueError):
        PegGrid(-1)


def test_place_get_take():
    grid = PegGrid(3)
    bean = object()

    grid.place(2, 1, bean)
    assert grid[2, 1] is bean
    assert grid.get(2, 1) is bean
    assert grid.occupied_count() == 1

    assert grid.take(2, 1) is bean
    assert grid[2, 1] is None
    assert grid.occupied_count() == 0


@pytest.mark.parametrize("row, column", [(0, 1), (1, 2), (3, 0), (-1, 0), (2, -1)])
def test_illegal_positions(row, column):
    grid = PegGrid(3)
    with pytest.raises(PegPositionError) as exc_info:
        grid.place(row, column, object())
    assert exc_info.value.details["rows"] == 3


def test_place_on_occupied_cell_fails():
    grid = PegGrid(2)
    grid.place(1, 0, object())
    with pytest.raises(InvariantViolationError) as exc_info:
        grid.place(1, 0, object())
    assert exc_info.value.invariant == "one-bean-per-cell"
    assert exc_info.value.details == {"row": 1, "column": 0}


def test_take_from_empty_cell_fails():
    grid = PegGrid(2)
    with pytest.raises(BeanCounterError) as exc_info:
        grid.take(0, 0)
    assert isinstance(exc_info.value, InvariantViolationError)
    assert exc_info.value.invariant == "occupied-cell"


def test_column_of():
    grid = PegGrid(4)
    grid.place(3, 2, object())
    assert grid.column_of(3) == 2
    assert grid.column_of(0) is None
    with pytest.raises(PegPositionError):
        grid.column_of(4)


def test_occupied_order_and_clear():
    grid = PegGrid(3)
    a, b, c = object(), object(), object()
    grid.place(2, 2, c)
    grid.place(0, 0, a)
    grid.place(1, 0, b)

    assert [(row, column) for row, column, _ in grid.occupied()] == [(0, 0), (1, 0), (2, 2)]
    assert grid.clear() == [a, b, c]
    assert list(grid.occupied()) == []
