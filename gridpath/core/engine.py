# gridpath/core/engine.py
#!/usr/bin/env python3
"""
In-process entry point: run request in, trace + result out.

    resp = run(RunRequest(grid_size=20, blocked={(3, 4)}, start=(0, 0),
                          end=(19, 19), strategy="astar"))
    resp.result.path   # None when no path exists
    resp.trace         # ordered TraceEvents for a replay
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple, Type

from gridpath.config import DEFAULT_TOLERANCE
from gridpath.core.search import AStarSearch, DijkstraSearch, GridSearch
from gridpath.core.types import Cell, Grid, InvalidEndpoint, SearchResult, TraceEvent

logger = logging.getLogger(__name__)

DIJKSTRA = "dijkstra"
ASTAR = "astar"

STRATEGIES: Dict[str, Type[GridSearch]] = {
    DIJKSTRA: DijkstraSearch,
    ASTAR: AStarSearch,
}
_ALIASES = {"a*": ASTAR, "a-star": ASTAR, "a_star": ASTAR}


@dataclass(frozen=True)
class RunRequest:
    grid_size: int
    blocked: FrozenSet[Cell] = field(default_factory=frozenset)
    start: Cell = (0, 0)
    end: Cell = (0, 0)
    strategy: str = DIJKSTRA


@dataclass(frozen=True)
class RunResponse:
    trace: Tuple[TraceEvent, ...]
    result: SearchResult


def strategy_key(strategy: str) -> str:
    key = strategy.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}; expected one of {sorted(STRATEGIES)}")
    return key


def validate_endpoints(grid: Grid, start: Cell, end: Cell) -> None:
    for label, c in (("start", start), ("end", end)):
        if not grid.in_bounds(c):
            raise InvalidEndpoint(f"{label} {c} is outside a {grid.size}x{grid.size} grid")
        if grid.is_block(c):
            raise InvalidEndpoint(f"{label} {c} is blocked")
    if start == end:
        raise InvalidEndpoint(f"start and end are the same cell {start}")


def search(grid: Grid, start: Cell, end: Cell, strategy: str = DIJKSTRA,
           tolerance: float = DEFAULT_TOLERANCE) -> SearchResult:
    """Validate the endpoints and run one strategy on ``grid``."""
    algo_cls = STRATEGIES[strategy_key(strategy)]
    validate_endpoints(grid, start, end)
    # a fresh instance per call; nothing carries over between runs
    return algo_cls(tolerance=tolerance).run(grid, tuple(start), tuple(end))


def run(request: RunRequest, tolerance: float = DEFAULT_TOLERANCE) -> RunResponse:
    grid = Grid.from_blocked(request.grid_size, request.blocked)
    result = search(grid, request.start, request.end, request.strategy, tolerance)
    if not result.found:
        logger.info("%s: no path from %s to %s", result.metrics.get("algo"),
                    request.start, request.end)
    return RunResponse(trace=result.trace, result=result)
