"""Grid problems: counting islands of land cells."""

from __future__ import annotations

from typing import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Number of 4-connected groups of cells equal to 1; ``grid`` is not changed."""
    land = {
        (row, col)
        for row, cells in enumerate(grid)
        for col, cell in enumerate(cells)
        if cell == 1
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            row, col = stack.pop()
            for d_row, d_col in _STEPS:
                neighbour = (row + d_row, col + d_col)
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return islands