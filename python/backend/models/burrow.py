"""Burrow model: a corridor above a row of stack-shaped rooms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cached_property

from backend.models.piece import PieceType

Corridor = tuple[PieceType | None, ...]
Room = tuple[PieceType, ...]

MAX_ROOMS = len(PieceType)


@dataclass(frozen=True)
class Layout:
    """Structural constants shared by every configuration of one puzzle.

    Room *r* is entered from corridor column ``2r + 2`` and is home to the
    *r*-th piece type. The corridor has one extra column at the far left,
    one at the far right, and one between every pair of entrances::

        #############
        #...........#      corridor columns 0..10
        ###.#.#.#.###      entrances at 2, 4, 6, 8
          #.#.#.#.#
          #########
    """

    room_count: int
    depth: int

    def __post_init__(self) -> None:
        if not 1 <= self.room_count <= MAX_ROOMS:
            raise ValueError(
                f"A burrow has between 1 and {MAX_ROOMS} rooms, "
                f"got {self.room_count}."
            )
        if self.depth < 1:
            raise ValueError(f"Room depth must be positive, got {self.depth}.")

    # -- geometry -------------------------------------------------------------

    @property
    def corridor_length(self) -> int:
        return 2 * self.room_count + 3

    @cached_property
    def homes(self) -> tuple[PieceType, ...]:
        return tuple(PieceType)[: self.room_count]

    @staticmethod
    def entrance(room: int) -> int:
        return 2 * room + 2

    def is_stop(self, pos: int) -> bool:
        return not (2 <= pos <= 2 * self.room_count and pos % 2 == 0)

    # -- derived configurations -----------------------------------------------

    def empty_corridor(self) -> Corridor:
        return (None,) * self.corridor_length

    def goal(self) -> Burrow:
        """Every room full of its home type, nothing in the corridor."""
        return Burrow(
            corridor=self.empty_corridor(),
            rooms=tuple((home,) * self.depth for home in self.homes),
            layout=self,
        )


@dataclass(frozen=True)
class Burrow:
    """Immutable snapshot of where every piece currently is.

    ``rooms[r]`` lists the pieces of room *r* deepest first, so the last
    element is the one next to the corridor. Only ``corridor`` and ``rooms``
    take part in equality and hashing.
    """

    corridor: Corridor
    rooms: tuple[Room, ...]
    layout: Layout = field(compare=False, repr=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rooms(
        cls,
        rooms: Sequence[Sequence[PieceType]],
        corridor: Sequence[PieceType | None] | None = None,
        depth: int | None = None,
    ) -> Burrow:
        """Create a validated burrow.

        *depth* defaults to the size of the fullest room, which is right
        for any configuration whose corridor is empty.

        Example::

            Burrow.from_rooms([["A", "B"], ["B", "A"]])
        """
        stacks = tuple(tuple(PieceType(p) for p in room) for room in rooms)
        if depth is None:
            depth = max((len(s) for s in stacks), default=0)
        layout = Layout(room_count=len(stacks), depth=depth)

        if corridor is None:
            hall = layout.empty_corridor()
        else:
            hall = tuple(None if p is None else PieceType(p) for p in corridor)
            if len(hall) != layout.corridor_length:
                raise ValueError(
                    f"Expected a corridor of {layout.corridor_length} cells "
                    f"for {layout.room_count} rooms, got {len(hall)}."
                )
            for pos in range(layout.corridor_length):
                if hall[pos] is not None and not layout.is_stop(pos):
                    raise ValueError(f"Corridor cell {pos} is a room entrance.")

        for idx, stack in enumerate(stacks):
            if len(stack) > depth:
                raise ValueError(
                    f"Room {idx} holds {len(stack)} pieces but is only "
                    f"{depth} deep."
                )
        for piece in (*hall, *(p for s in stacks for p in s)):
            if piece is not None and piece.home_room >= layout.room_count:
                raise ValueError(f"Piece {piece} has no home room in this burrow.")

        return cls(corridor=hall, rooms=stacks, layout=layout)

    # -- queries --------------------------------------------------------------

    def corridor_at(self, pos: int) -> PieceType | None:
        return self.corridor[pos]

    def top_of(self, room: int) -> PieceType | None:
        stack = self.rooms[room]
        return stack[-1] if stack else None

    def is_settled(self, room: int) -> bool:
        """True if the room holds only its home type (possibly nothing)."""
        home = self.layout.homes[room]
        return all(p is home for p in self.rooms[room])

    def is_solved(self) -> bool:
        return self == self.layout.goal()

    # -- transitions ----------------------------------------------------------

    def exit_to(self, room: int, pos: int) -> Burrow:
        """Return a copy with the top piece of *room* moved to *pos*."""
        stack = self.rooms[room]
        if not stack:
            raise ValueError(f"Room {room} is empty.")
        if self.corridor[pos] is not None or not self.layout.is_stop(pos):
            raise ValueError(f"Corridor cell {pos} is not a free stop.")
        hall = list(self.corridor)
        hall[pos] = stack[-1]
        rooms = list(self.rooms)
        rooms[room] = stack[:-1]
        return Burrow(corridor=tuple(hall), rooms=tuple(rooms), layout=self.layout)

    def enter_from(self, pos: int) -> Burrow:
        """Return a copy with the corridor piece at *pos* pushed into its room."""
        piece = self.corridor[pos]
        if piece is None:
            raise ValueError(f"Corridor cell {pos} is empty.")
        if len(self.rooms[piece.home_room]) >= self.layout.depth:
            raise ValueError(f"Room {piece.home_room} is full.")
        hall = list(self.corridor)
        hall[pos] = None
        rooms = list(self.rooms)
        rooms[piece.home_room] = rooms[piece.home_room] + (piece,)
        return Burrow(corridor=tuple(hall), rooms=tuple(rooms), layout=self.layout)
