"""Counters describing the work a sorting run has done."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass
class SortingStatistics:
    """Thread-safe tally of comparisons, reads, writes and the cursor."""

    sort_time_ms: float = 0.0
    comparisons: int = 0
    reads: int = 0
    writes: int = 0
    cursor_position: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def reset(self) -> None:
        with self._lock:
            self.sort_time_ms = 0.0
            self.comparisons = 0
            self.reads = 0
            self.writes = 0
            self.cursor_position = 0

    def put_cursor_at(self, position: int, offset: int = 0) -> None:
        """Move the cursor; a positive ``offset`` steps it back by that much."""
        cursor = position
        if offset and cursor > 0 and offset > -1:
            cursor -= offset
        self.cursor_position = cursor

    def add_comparisons(self, count: int = 1) -> None:
        with self._lock:
            self.comparisons += count
        self.add_reads(count * 2)

    def add_assignments(self, count: int = 1) -> None:
        self.add_reads(count)
        self.add_writes(count)

    def add_swaps(self, count: int = 1) -> None:
        self.add_reads(count * 3)
        self.add_writes(count * 3)

    def add_reads(self, count: int = 1) -> None:
        with self._lock:
            self.reads += count

    def add_writes(self, count: int = 1) -> None:
        with self._lock:
            self.writes += count

    def add_time(self, milliseconds: float) -> None:
        with self._lock:
            self.sort_time_ms += milliseconds