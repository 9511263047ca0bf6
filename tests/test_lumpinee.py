import pytest

from contestkit.lumpinee import best_treasure

GRID = [[1, 2], [3, 4]]


def test_zero_length_path_gathers_nothing():
    assert best_treasure(GRID, 0) == 0


def test_single_cell():
    assert best_treasure([[5]], 3) == 5


def test_single_step_takes_largest_cell():
    grid = [[3, 8, 1], [2, 6, 7]]
    assert best_treasure(grid, 1) == max(max(row) for row in grid)


def test_pinned_values():
    assert best_treasure(GRID, 2) == 7
    assert best_treasure(GRID, 3) == 8


def test_all_negative_grid_gives_zero():
    assert best_treasure([[-1, -2], [-3, -4]], 2) == 0


def test_monotone_in_length_for_non_negative_grid():
    grid = [[1, 0, 4], [2, 5, 1], [3, 1, 2]]
    results = [best_treasure(grid, k) for k in range(8)]
    assert results == sorted(results)


def test_long_paths_stabilise():
    grid = [[1, 0, 4], [2, -5, 1], [3, 1, 2]]
    assert best_treasure(grid, 6) == best_treasure(grid, 60)


def test_empty_grid():
    assert best_treasure([], 4) == 0


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        best_treasure([[1, 2], [3]], 2)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        best_treasure(GRID, -1)