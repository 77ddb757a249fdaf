import logging
import math

import numpy as np

from .heap import MinHeapQueue

GridIndex = tuple[int, int]

_STEPS: list[GridIndex] = [(1, 0), (-1, 0), (0, 1), (0, -1)]

_logger = logging.getLogger(__name__)


def passable_neighbors(ix: GridIndex, grid: np.ndarray) -> list[GridIndex]:
    """4-connected cells next to ``ix`` that lie on the grid and have a finite cost."""
    rows, cols = grid.shape
    result = []
    for dx, dy in _STEPS:
        row, col = ix[0] + dx, ix[1] + dy
        if 0 <= row < rows and 0 <= col < cols and math.isfinite(grid[row, col]):
            result.append((row, col))
    return result


def shortest_costs(grid: np.ndarray, start: GridIndex) -> np.ndarray:
    """
    Cheapest cost of reaching every cell of ``grid`` from ``start``.

    Moving into a cell costs that cell's value, moves are 4-connected. Cells
    with a nan or inf cost can't be entered and stay at inf, as do cells that
    are cut off by them. The start cell costs 0.
    """
    if grid.ndim != 2:
        raise ValueError(f"Grid must be 2-dimensional, got {grid.ndim} dimensions")
    # A list would index whole rows
    start = tuple(start)
    if len(start) != 2:
        raise ValueError(f"Start must be a (row, column) pair, got {start}")
    if not (0 <= start[0] < grid.shape[0] and 0 <= start[1] < grid.shape[1]):
        raise ValueError(f"Start {start} is outside of grid of shape {grid.shape}")
    if np.any(grid < 0):
        raise ValueError("Grid costs must be non-negative")

    costs = np.full(grid.shape, np.inf)
    costs[start] = 0.0

    queue: MinHeapQueue[float, GridIndex] = MinHeapQueue()
    queue.enqueue(0.0, start)

    settled = 0
    stale = 0
    while not queue.is_empty():
        cost, ix = queue.dequeue()
        # No decrease-key, so outdated entries for a cell are skipped here.
        if cost > costs[ix]:
            stale += 1
            continue
        settled += 1

        for neighbor in passable_neighbors(ix, grid):
            new_cost = cost + grid[neighbor]
            if new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                queue.enqueue(new_cost, neighbor)

    _logger.debug("Settled %d cells, skipped %d stale entries", settled, stale)

    return costs
