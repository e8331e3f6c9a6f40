# gridpath/core/cost_model.py
#!/usr/bin/env python3
"""
Movement rules shared by every search strategy.

- 8-connected: the four axis moves plus the four diagonals.
- Axis move costs 1.0, diagonal move costs sqrt(2).
- Out-of-bounds and blocked cells are never returned.
"""

from math import sqrt
from typing import List, Sequence, Tuple

from gridpath.core.types import Cell, Grid

CARDINAL_COST = 1.0
DIAGONAL_COST = sqrt(2.0)  # ~1.414

# Fixed enumeration order; it decides insertion order among equal priorities.
DIRECTIONS: Tuple[Cell, ...] = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)


def step_cost(dx: int, dy: int) -> float:
    return DIAGONAL_COST if dx != 0 and dy != 0 else CARDINAL_COST


def neighbors(grid: Grid, c: Cell) -> List[Tuple[Cell, float]]:
    """Return ``(cell, move_cost)`` for every legal move out of ``c``."""
    x, y = c
    out: List[Tuple[Cell, float]] = []
    for dx, dy in DIRECTIONS:
        n = (x + dx, y + dy)
        if grid.in_bounds(n) and not grid.is_block(n):
            out.append((n, step_cost(dx, dy)))
    return out


def move_cost(a: Cell, b: Cell) -> float:
    dx, dy = b[0] - a[0], b[1] - a[1]
    if (dx, dy) not in DIRECTIONS:
        raise ValueError(f"{a} -> {b} is not a single 8-connected move")
    return step_cost(dx, dy)


def path_cost(path: Sequence[Cell]) -> float:
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += move_cost(a, b)
    return total
