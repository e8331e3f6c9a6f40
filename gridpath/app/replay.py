# gridpath/app/replay.py
#!/usr/bin/env python3
"""
Replays a finished search trace onto a per-cell state map.

The viewer calls advance() once per animation tick; it never talks to the
search itself. States: "wall", "empty", "anchor", plus the trace tags.
Anchors (start/goal) keep their state whatever the trace says.
"""

from typing import Dict, Iterable, List, Optional

from gridpath.core.types import Cell, Grid, TraceEvent

WALL = "wall"
EMPTY = "empty"
ANCHOR = "anchor"


class TracePlayer:
    def __init__(self, grid: Grid, start: Cell, goal: Cell):
        self.grid = grid
        self.start = start
        self.goal = goal
        self.states: Dict[Cell, str] = {}
        self._events: List[TraceEvent] = []
        self._pos = 0
        self.reset()

    def reset(self) -> None:
        """Repaint from the grid and drop any queued trace."""
        self.states = {}
        for y in range(self.grid.size):
            for x in range(self.grid.size):
                self.states[(x, y)] = WALL if self.grid.is_block((x, y)) else EMPTY
        self.states[self.start] = ANCHOR
        self.states[self.goal] = ANCHOR
        self._events = []
        self._pos = 0

    def load(self, trace: Iterable[TraceEvent]) -> None:
        self.reset()
        self._events = list(trace)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def total(self) -> int:
        return len(self._events)

    @property
    def finished(self) -> bool:
        return self._pos >= len(self._events)

    def advance(self, n: int = 1) -> int:
        """Apply up to ``n`` queued events; return how many were applied."""
        applied = 0
        while applied < n and not self.finished:
            ev = self._events[self._pos]
            if ev.cell != self.start and ev.cell != self.goal:
                self.states[ev.cell] = ev.tag
            self._pos += 1
            applied += 1
        return applied

    def state_at(self, c: Cell) -> Optional[str]:
        return self.states.get(c)
