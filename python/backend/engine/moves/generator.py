"""Legal one-piece relocations between burrow configurations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from backend.models.burrow import Burrow, Layout


class Move(NamedTuple):
    cost: int
    burrow: Burrow


class MoveGenerator:
    """Produces every legal move out of a configuration.

    A move either lifts the top piece of an unsettled room onto a free
    corridor stop, or drops a corridor piece into its home room once that
    room holds nothing but home-type pieces. Pieces never travel from room
    to room directly.
    """

    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        self._entrances = tuple(
            layout.entrance(r) for r in range(layout.room_count)
        )

    def moves(self, burrow: Burrow) -> list[Move]:
        return [*self.exits(burrow), *self.enters(burrow)]

    # -- room -> corridor -----------------------------------------------------

    def exits(self, burrow: Burrow) -> Iterator[Move]:
        depth = self.layout.depth
        for room, stack in enumerate(burrow.rooms):
            if burrow.is_settled(room):
                continue

            piece = stack[-1]
            entrance = self._entrances[room]
            climb = depth - len(stack) + 1
            for pos in self.reachable_stops(burrow, entrance):
                cost = (climb + abs(pos - entrance)) * piece.step_cost
                yield Move(cost, burrow.exit_to(room, pos))

    def reachable_stops(self, burrow: Burrow, entrance: int) -> Iterator[int]:
        """Free corridor stops reachable from *entrance* without passing a piece."""
        hall = burrow.corridor
        is_stop = self.layout.is_stop
        for step, end in ((1, len(hall)), (-1, -1)):
            for pos in range(entrance + step, end, step):
                if hall[pos] is not None:
                    break
                if is_stop(pos):
                    yield pos

    # -- corridor -> room -----------------------------------------------------

    def enters(self, burrow: Burrow) -> Iterator[Move]:
        depth = self.layout.depth
        hall = burrow.corridor
        for pos, piece in enumerate(hall):
            if piece is None:
                continue

            room = piece.home_room
            stack = burrow.rooms[room]
            if len(stack) >= depth or any(p is not piece for p in stack):
                continue

            entrance = self._entrances[room]
            step = 1 if entrance > pos else -1
            if any(hall[i] is not None for i in range(pos + step, entrance, step)):
                continue

            cost = (abs(entrance - pos) + depth - len(stack)) * piece.step_cost
            yield Move(cost, burrow.enter_from(pos))
