# gridpath/core/search.py
#!/usr/bin/env python3
"""
Grid search shared by Dijkstra and A*, one expansion per step().

Both strategies run the same loop; they differ only in the heap priority:
- Dijkstra: priority = g
- A*:       priority = g + h, h = Chebyshev distance to the goal

Heap entries are (priority, seq, g, cell). seq is a monotonic counter, so
equal priorities pop in insertion order. Entries are never updated in place:
a better g pushes a new entry and the old one is skipped when popped
("lazy deletion"). The stale check compares g, never the priority.

Trace:
- frontier: a neighbour got a better g and was pushed
- visited:  a non-stale entry was popped
- path:     reconstructed path cells, after the search
Start and goal are anchors and never appear in the trace.
"""

import heapq
import logging
from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Tuple

from gridpath.config import DEFAULT_TOLERANCE
from gridpath.core.cost_model import neighbors
from gridpath.core.path import reconstruct_path
from gridpath.core.trace import TraceRecorder
from gridpath.core.types import Cell, FRONTIER, Grid, SearchResult, VISITED

logger = logging.getLogger(__name__)


def chebyshev(a: Cell, b: Cell) -> float:
    """Admissible and consistent for 8-connected moves costing >= 1."""
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


@dataclass
class GridSearch:
    name: str = "Search"
    tolerance: float = DEFAULT_TOLERANCE   # slack for float drift in the stale check

    # Internal state, rebuilt by reset()
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    open_pq: List[Tuple[float, int, float, Cell]] = field(default_factory=list)  # (priority, seq, g, cell)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, float] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    trace: TraceRecorder = field(default_factory=TraceRecorder)
    popped_count: int = 0
    stale_count: int = 0
    pushed_count: int = 0
    done: bool = False
    no_path: bool = False
    seq: int = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Cell, goal: Cell) -> None:
        self.grid = grid
        self.start = start
        self.goal = goal
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the heap with the start cell."""
        if self.grid is None:
            return
        self.open_pq.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        # fresh recorder, so traces handed out earlier stay untouched
        self.trace = TraceRecorder()
        self.popped_count = 0
        self.stale_count = 0
        self.pushed_count = 0
        self.done = False
        self.no_path = False
        self.seq = 0

        s = self.start
        self.g[s] = 0.0
        self._push(s, 0.0)

    # -------------------- strategy hook --------------------

    def priority(self, c: Cell, g: float) -> float:
        return g

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, c: Cell, g: float) -> None:
        heapq.heappush(self.open_pq, (self.priority(c, g), self._bump(), g, c))
        self.pushed_count += 1
        self._emit(c, FRONTIER)

    def _emit(self, c: Cell, tag: str) -> None:
        if c == self.start or c == self.goal:
            return
        self.trace.record(c, tag)

    # -------------------- main stepping logic --------------------

    def step(self) -> str:
        """
        Run ONE expansion and return "running", "done" or "no_path".
          - Pop the lowest-priority entry, skipping stale ones.
          - If it is the goal, stop.
          - Else relax its neighbours.
        """
        if self.grid is None:
            raise RuntimeError("init() must be called before step()")
        if self.done:
            return "done"
        if self.no_path:
            return "no_path"
        if not self.open_pq:
            self.no_path = True
            return "no_path"

        _, _, g_u, u = heapq.heappop(self.open_pq)
        if g_u > self.g.get(u, inf) + self.tolerance:
            self.stale_count += 1
            return "running"

        self.popped_count += 1
        self.closed_set.add(u)
        self._emit(u, VISITED)

        if u == self.goal:
            self.done = True
            return "done"

        g_here = self.g[u]
        for v, cost in neighbors(self.grid, u):
            alt = g_here + cost
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                self._push(v, alt)

        return "running"

    def run(self, grid: Grid, start: Cell, goal: Cell) -> SearchResult:
        """Search to completion and return the path, cost and full trace."""
        self.init(grid, start, goal)
        status = self.step()
        while status == "running":
            status = self.step()

        cost = self.g.get(goal, inf)
        path = None
        if cost < inf:
            path = reconstruct_path(self.parent, start, goal,
                                    limit=grid.size * grid.size, trace=self.trace)

        result = SearchResult(
            status="found" if path is not None else "no_path",
            path=path,
            cost=cost if path is not None else None,
            trace=self.trace.events(),
            metrics=self._metrics(path),
        )
        logger.debug("%s %s -> %s: %s (popped=%d, stale=%d, events=%d)",
                     self.name, start, goal, result.status,
                     self.popped_count, self.stale_count, len(result.trace))
        self._discard()
        return result

    def _discard(self) -> None:
        # per-run state does not outlive run()
        self.open_pq.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()

    # -------------------- metrics --------------------

    def _metrics(self, path: Optional[List[Cell]] = None) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": self.stale_count,
            "pushed": self.pushed_count,
            "open_size": len(self.open_pq),
            "closed_count": len(self.closed_set),
            "path_len": len(path) if path else 0,
            "total_cost": self.g.get(self.goal) if path else None,
        }


@dataclass
class DijkstraSearch(GridSearch):
    name: str = "Dijkstra"


@dataclass
class AStarSearch(GridSearch):
    name: str = "A*"

    def priority(self, c: Cell, g: float) -> float:
        return g + self._h(c)

    def _h(self, c: Cell) -> float:
        if self.goal is None:
            return 0.0
        return chebyshev(c, self.goal)
