import numpy as np
import pytest

from pqueue.grid import passable_neighbors, shortest_costs


def test_neighbors_in_corner():
    grid = np.zeros((3, 4))

    assert sorted(passable_neighbors((0, 0), grid)) == [(0, 1), (1, 0)]
    assert sorted(passable_neighbors((2, 3), grid)) == [(1, 3), (2, 2)]
    assert len(passable_neighbors((1, 1), grid)) == 4


def test_neighbors_skip_blocked_cells():
    grid = np.zeros((3, 3))
    grid[0, 1] = np.inf
    grid[1, 0] = np.nan

    assert sorted(passable_neighbors((1, 1), grid)) == [(1, 2), (2, 1)]


def test_uniform_grid_is_manhattan_distance():
    grid = np.ones((4, 5))

    costs = shortest_costs(grid, (1, 2))

    x, y = np.indices(grid.shape)
    np.testing.assert_array_equal(costs, np.abs(x - 1) + np.abs(y - 2))


def test_takes_cheaper_detour():
    grid = np.array(
        [
            [1.0, 9.0, 1.0],
            [1.0, 9.0, 1.0],
            [1.0, 1.0, 1.0],
        ]
    )

    costs = shortest_costs(grid, (0, 0))

    assert costs[0, 0] == 0
    # down, across the bottom and up is cheaper than crossing the 9s
    assert costs[0, 2] == 6
    assert costs[0, 1] == 9


def test_blocked_cells_are_unreachable():
    grid = np.array(
        [
            [1.0, np.inf, 1.0],
            [1.0, np.nan, 1.0],
            [1.0, np.inf, 1.0],
        ]
    )

    costs = shortest_costs(grid, (1, 0))

    assert np.all(np.isinf(costs[:, 1:]))
    np.testing.assert_array_equal(costs[:, 0], [1.0, 0.0, 1.0])


def test_invalid_input():
    with pytest.raises(ValueError):
        shortest_costs(np.ones(3), (0, 0))
    with pytest.raises(ValueError):
        shortest_costs(np.ones((2, 2)), (2, 0))
    with pytest.raises(ValueError):
        shortest_costs(-np.ones((2, 2)), (0, 0))


def test_list_start_is_a_single_cell():
    grid = np.ones((3, 3))

    costs = shortest_costs(grid, [0, 0])

    np.testing.assert_array_equal(costs, shortest_costs(grid, (0, 0)))
    assert costs[0, 0] == 0
    assert costs[0, 1] == 1
