# gridpath/core/trace.py
#!/usr/bin/env python3
from typing import Iterator, List, Tuple

from gridpath.core.types import Cell, TRACE_TAGS, TraceEvent


class TraceRecorder:
    """Append-only log of what the search touched, in emission order.

    Nothing is deduplicated: a cell may show up as frontier several times
    before it is visited, and a replay applies the events in order so the
    last one wins.
    """

    def __init__(self) -> None:
        self._events: List[TraceEvent] = []

    def record(self, cell: Cell, tag: str) -> None:
        if tag not in TRACE_TAGS:
            raise ValueError(f"unknown trace tag {tag!r}")
        self._events.append(TraceEvent(cell, tag))

    def events(self) -> Tuple[TraceEvent, ...]:
        return tuple(self._events)

    def count(self, tag: str) -> int:
        return sum(1 for e in self._events if e.tag == tag)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self._events)
