# gridpath/core/path.py
#!/usr/bin/env python3
from typing import Dict, List, Optional

from gridpath.core.trace import TraceRecorder
from gridpath.core.types import Cell, InternalInvariantViolation, PATH


def reconstruct_path(parent: Dict[Cell, Cell], start: Cell, end: Cell, limit: int,
                     trace: Optional[TraceRecorder] = None) -> List[Cell]:
    """Walk predecessor links back from ``end`` and return start..end.

    ``limit`` caps the number of links followed (N*N for an N-sized grid).
    A chain that breaks or runs past the limit means the search state is
    corrupt, so it raises instead of returning a partial path.
    """
    path: List[Cell] = [end]
    cur = end
    steps = 0
    while cur != start:
        if steps >= limit:
            raise InternalInvariantViolation(
                f"predecessor chain from {end} did not reach {start} within {limit} steps")
        if cur not in parent:
            raise InternalInvariantViolation(f"no predecessor recorded for {cur}")
        cur = parent[cur]
        path.append(cur)
        steps += 1
    path.reverse()

    if trace is not None:
        for c in path:
            if c != start and c != end:
                trace.record(c, PATH)
    return path
