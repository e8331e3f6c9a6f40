# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

Cell = Tuple[int, int]  # (col, row)

# Trace tags, applied in order by the replay
FRONTIER = "frontier"
VISITED = "visited"
PATH = "path"
TRACE_TAGS = (FRONTIER, VISITED, PATH)


class GridPathError(Exception):
    """Base class for errors raised by the search engine."""


class InvalidEndpoint(GridPathError, ValueError):
    """Start or end is out of bounds, blocked, or start == end."""


class InternalInvariantViolation(GridPathError, RuntimeError):
    """Predecessor links do not lead back to the start. Indicates a bug."""


@dataclass
class Grid:
    size: int
    cells: List[List[bool]]             # [row][col], True = blocked

    @classmethod
    def empty(cls, size: int) -> "Grid":
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        return cls(size, [[False] * size for _ in range(size)])

    @classmethod
    def from_blocked(cls, size: int, blocked: Iterable[Cell]) -> "Grid":
        grid = cls.empty(size)
        for c in blocked:
            grid.set_blocked(c, True)
        return grid

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def is_block(self, c: Cell) -> bool:
        x, y = c
        return self.cells[y][x]

    def set_blocked(self, c: Cell, value: bool) -> None:
        if not self.in_bounds(c):
            raise ValueError(f"cell {c} is outside a {self.size}x{self.size} grid")
        x, y = c
        self.cells[y][x] = bool(value)

    def toggle(self, c: Cell) -> bool:
        """Flip the wall flag of ``c`` and return the new value."""
        self.set_blocked(c, not self.is_block(c))
        return self.is_block(c)

    def clear(self) -> None:
        for row in self.cells:
            row[:] = [False] * self.size

    def blocked_cells(self) -> Set[Cell]:
        return {(x, y)
                for y, row in enumerate(self.cells)
                for x, v in enumerate(row) if v}


@dataclass(frozen=True)
class TraceEvent:
    cell: Cell
    tag: str                      # FRONTIER | VISITED | PATH


@dataclass
class SearchResult:
    status: str                   # "found" | "no_path"
    path: Optional[List[Cell]] = None
    cost: Optional[float] = None
    trace: Tuple[TraceEvent, ...] = ()
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == "found"
