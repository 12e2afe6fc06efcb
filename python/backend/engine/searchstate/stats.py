"""Counters collected while a search runs."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class SearchStats:
    """Instrumentation for one search, plus its wall-clock time."""

    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    stale: int = 0
    peak_open: int = 0
    interned: int = 0
    # Costs of non-stale pops, in pop order. Only filled when tracing.
    frontier: list[int] = field(default_factory=list)

    _start_time: float = field(default=0.0, repr=False)
    _elapsed: float | None = field(default=0.0, repr=False)

    # -- time tracking --------------------------------------------------------

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._elapsed is None:
            self._elapsed = time.perf_counter() - self._start_time

    @property
    def elapsed_time(self) -> float:
        if self._elapsed is None:
            return time.perf_counter() - self._start_time
        return self._elapsed

    def as_dict(self) -> dict[str, float | int]:
        return {
            "expanded": self.expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "stale": self.stale,
            "peak_open": self.peak_open,
            "interned": self.interned,
            "time": self.elapsed_time,
        }
