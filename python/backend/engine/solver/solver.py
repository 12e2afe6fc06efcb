"""Least-cost search from a burrow configuration to its sorted goal."""

from __future__ import annotations

import heapq
import logging

from backend.engine.interner import StateInterner
from backend.engine.moves import MoveGenerator
from backend.engine.searchstate import SearchStats
from backend.models.burrow import Burrow
from backend.models.errors import SearchExhaustedError

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 50_000


class Search:
    """Dijkstra over the implicit configuration graph.

    Neighbours come from ``MoveGenerator`` on demand. Configurations are
    interned so the best-known cost table is a list indexed by id. The
    queue may hold superseded entries; they are skipped when popped.

    One instance solves one start configuration. Nothing is shared between
    instances, so separate searches may run on separate threads.
    """

    def __init__(
        self,
        start: Burrow,
        *,
        max_expansions: int | None = None,
        trace_frontier: bool = False,
    ) -> None:
        self.start = start
        self.goal = start.layout.goal()
        self.max_expansions = max_expansions
        self.trace_frontier = trace_frontier

        self.generator = MoveGenerator(start.layout)
        self.interner = StateInterner()
        self.best: list[int] = []
        self.stats = SearchStats()
        self.cost: int | None = None
        self._queue: list[tuple[int, int]] = []

    def run(self) -> int:
        """Return the minimal total cost to sort the burrow.

        Raises ``SearchExhaustedError`` if the queue empties (or the
        expansion budget runs out) before the goal is reached.
        """
        self._reset()
        stats = self.stats
        stats.start()
        try:
            self.cost = 0 if self.start.is_solved() else self._loop()
            return self.cost
        finally:
            stats.stop()
            stats.interned = len(self.interner)
            logger.info(
                "search finished: %d expanded, %d generated, %d states in %.2fs",
                stats.expanded,
                stats.generated,
                stats.interned,
                stats.elapsed_time,
            )

    def _loop(self) -> int:
        stats = self.stats
        queue = self._queue
        best = self.best
        intern = self.interner.intern
        goal = self.goal

        self._record(intern(self.start), 0)
        goal_id: int | None = None

        while queue:
            stats.peak_open = max(stats.peak_open, len(queue))
            cost, state_id = heapq.heappop(queue)
            if cost > best[state_id]:
                stats.stale += 1
                continue

            # The goal is final only once popped. A predecessor popped later
            # may still reach it through a cheaper last move.
            if state_id == goal_id:
                return cost

            if self.max_expansions is not None and stats.expanded >= self.max_expansions:
                raise SearchExhaustedError(
                    f"Gave up after {stats.expanded} expansions "
                    f"(limit {self.max_expansions})."
                )

            stats.expanded += 1
            if self.trace_frontier:
                stats.frontier.append(cost)
            if stats.expanded % PROGRESS_EVERY == 0:
                logger.debug(
                    "expanded %d states, frontier cost %d, %d queued",
                    stats.expanded,
                    cost,
                    len(queue),
                )

            for move_cost, burrow in self.generator.moves(self.interner.lookup(state_id)):
                total = cost + move_cost
                stats.generated += 1
                next_id = intern(burrow)
                if goal_id is None and burrow == goal:
                    goal_id = next_id

                if next_id == len(best):
                    self._record(next_id, total)
                else:
                    stats.duplicates += 1
                    if total < best[next_id]:
                        best[next_id] = total
                        heapq.heappush(queue, (total, next_id))

        raise SearchExhaustedError("Queue exhausted without reaching the goal.")

    def _reset(self) -> None:
        self.interner = StateInterner()
        self.best = []
        self.stats = SearchStats()
        self.cost = None
        self._queue = []

    def _record(self, state_id: int, cost: int) -> None:
        self.best.append(cost)
        heapq.heappush(self._queue, (cost, state_id))


class Solver:
    """Stateless facade — all methods are static."""

    @staticmethod
    def solve(burrow: Burrow, *, max_expansions: int | None = None) -> int:
        """Return the minimal cost to sort *burrow*."""
        return Search(burrow, max_expansions=max_expansions).run()

    @staticmethod
    def search(burrow: Burrow, *, max_expansions: int | None = None) -> Search:
        """Run a search and hand back the finished instance for its stats."""
        search = Search(burrow, max_expansions=max_expansions)
        search.run()
        return search
