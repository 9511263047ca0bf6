import pytest

from contestkit.sleepy import min_path_cost

GRID = [[4, 2, 7, 1], [3, 8, 2, 6], [9, 1, 5, 3]]


def test_single_column_takes_minimum():
    assert min_path_cost([[5], [2], [8]]) == 2


def test_single_row_takes_everything():
    row = [3, 1, 4, 1, 5]
    assert min_path_cost([row]) == sum(row)


def test_uniform_grid():
    assert min_path_cost([[6] * 5 for _ in range(4)]) == 6 * 5


def test_zigzag_pinned():
    assert min_path_cost([[1, 9, 1], [9, 1, 9]]) == 3


def test_bounded_by_column_minima_and_straight_rows():
    cost = min_path_cost(GRID)
    assert cost >= sum(min(col) for col in zip(*GRID))
    assert cost <= min(sum(row) for row in GRID)


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        min_path_cost([])


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        min_path_cost([[1, 2], [3]])