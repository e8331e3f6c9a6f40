"""
Shared fixtures for the search tests.

brute_force_cost is an independent Bellman-Ford style relaxation over the
8-connected grid; it does not use the engine's cost model.
"""

import math
import random
from typing import Callable, Iterable, Optional, Set, Tuple

import pytest

from gridpath.core.types import Grid

Cell = Tuple[int, int]


def _brute_force_cost(size: int, blocked: Iterable[Cell], start: Cell, end: Cell) -> Optional[float]:
    walls = set(blocked)
    dist = {start: 0.0}
    changed = True
    while changed:
        changed = False
        for (x, y), d in list(dist.items()):
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    n = (x + dx, y + dy)
                    if not (0 <= n[0] < size and 0 <= n[1] < size) or n in walls:
                        continue
                    nd = d + (math.sqrt(2) if dx and dy else 1.0)
                    if nd < dist.get(n, math.inf) - 1e-12:
                        dist[n] = nd
                        changed = True
    return dist.get(end)


@pytest.fixture
def brute_force_cost() -> Callable[..., Optional[float]]:
    return _brute_force_cost


@pytest.fixture
def random_walls() -> Callable[[int, int, float, Cell, Cell], Set[Cell]]:
    """Return a seeded wall set that never covers the endpoints."""
    def make(seed: int, size: int, density: float, start: Cell, end: Cell) -> Set[Cell]:
        rng = random.Random(seed)
        return {(x, y)
                for y in range(size) for x in range(size)
                if (x, y) not in (start, end) and rng.random() < density}
    return make


@pytest.fixture
def open_grid() -> Callable[[int], Grid]:
    return Grid.empty
