"""Reads and writes the textual burrow diagram.

A diagram looks like::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

``#`` and spaces are walls, ``.`` is empty floor and ``A``-``D`` are
pieces. The first interior row is the corridor; rooms hang below it.
"""

from __future__ import annotations

from collections import Counter

from backend.models.burrow import Burrow, Layout
from backend.models.errors import DiagramError
from backend.models.piece import PieceType

WALL = "#"
FLOOR = "."
SYMBOLS = frozenset(p.value for p in PieceType)

# Rows inserted below the first room row to build the deep variant.
UNFOLD_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


class Diagram:
    """Stateless diagram helpers — all methods are static."""

    @staticmethod
    def parse(text: str) -> Burrow:
        """Return the configuration drawn in *text*.

        Raises ``DiagramError`` for unknown symbols or a shape that is not
        a corridor with evenly spaced rooms of equal depth.
        """
        grid = Diagram._grid(text)
        if len(grid) < 3:
            raise DiagramError("A burrow needs a wall, a corridor and a room row.")

        hall_row = grid[1]
        open_cols = [c for c, ch in enumerate(hall_row) if ch != WALL]
        if not open_cols:
            raise DiagramError("The corridor row has no open cells.")
        left = open_cols[0]
        if open_cols != list(range(left, left + len(open_cols))):
            raise DiagramError("The corridor must be one unbroken row.")

        room_cols = [
            c for c, ch in enumerate(grid[2]) if ch != WALL and c in open_cols
        ]
        if not room_cols:
            raise DiagramError("No rooms below the corridor.")
        expected = [left + Layout.entrance(r) for r in range(len(room_cols))]
        if room_cols != expected:
            raise DiagramError(
                f"Rooms must open at corridor columns {expected}, "
                f"found {room_cols}."
            )
        depth = Diagram._depth(grid, room_cols)
        try:
            layout = Layout(room_count=len(room_cols), depth=depth)
        except ValueError as exc:
            raise DiagramError(str(exc)) from exc
        if len(open_cols) != layout.corridor_length:
            raise DiagramError(
                f"A corridor for {layout.room_count} rooms is "
                f"{layout.corridor_length} cells long, got {len(open_cols)}."
            )

        corridor = tuple(Diagram._piece(hall_row[c]) for c in open_cols)
        for pos, piece in enumerate(corridor):
            if piece is not None and not layout.is_stop(pos):
                raise DiagramError(f"Piece {piece} is parked on entrance {pos}.")

        rooms = []
        for r, col in enumerate(room_cols):
            cells = [grid[2 + d][col] for d in range(depth)]
            stack = [Diagram._piece(ch) for ch in reversed(cells)]
            occupied = [p for p in stack if p is not None]
            if stack[: len(occupied)] != occupied:
                raise DiagramError(f"Room {r} has a piece above an empty cell.")
            rooms.append(tuple(occupied))

        counts = Counter(p for p in corridor if p is not None)
        counts.update(p for room in rooms for p in room)
        for piece in PieceType:
            if piece.home_room >= layout.room_count:
                if counts[piece]:
                    raise DiagramError(f"Piece {piece} has no home room.")
            elif counts[piece] != depth:
                raise DiagramError(
                    f"Expected {depth} pieces of type {piece}, "
                    f"found {counts[piece]}."
                )

        return Burrow(corridor=corridor, rooms=tuple(rooms), layout=layout)

    @staticmethod
    def unfold(text: str) -> str:
        """Insert the two hidden rows below the first room row."""
        lines = text.strip("\n").splitlines()
        if len(lines) < 4:
            raise DiagramError("Diagram is too short to unfold.")
        if len(Diagram.parse(text).rooms) != len(PieceType):
            raise DiagramError("Only four-room diagrams can be unfolded.")
        return "\n".join([*lines[:3], *UNFOLD_ROWS, *lines[3:]]) + "\n"

    @staticmethod
    def render(burrow: Burrow) -> str:
        """Draw *burrow* in the same format ``parse`` reads."""
        layout = burrow.layout
        width = layout.corridor_length + 2
        lines = [
            WALL * width,
            WALL + "".join(Diagram._symbol(p) for p in burrow.corridor) + WALL,
        ]
        for d in range(layout.depth):
            # d == 0 is the row next to the corridor
            cells = []
            for stack in burrow.rooms:
                idx = layout.depth - 1 - d
                cells.append(Diagram._symbol(stack[idx] if idx < len(stack) else None))
            inner = WALL + WALL.join(cells) + WALL
            if d == 0:
                lines.append(WALL * 2 + inner + WALL * 2)
            else:
                lines.append("  " + inner)
        lines.append("  " + WALL * (width - 4))
        return "\n".join(lines) + "\n"

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _grid(text: str) -> list[str]:
        lines = text.strip("\n").splitlines()
        width = max((len(line) for line in lines), default=0)
        grid: list[str] = []
        for y, line in enumerate(lines):
            row = line.ljust(width, WALL).replace(" ", WALL)
            for x, ch in enumerate(row):
                if ch != WALL and ch != FLOOR and ch not in SYMBOLS:
                    raise DiagramError(f"Illegal tile {ch!r} at row {y}, column {x}.")
            grid.append(row)
        return grid

    @staticmethod
    def _depth(grid: list[str], room_cols: list[int]) -> int:
        depth = 0
        for row in grid[2:]:
            open_cells = [row[c] != WALL for c in room_cols]
            if not any(open_cells):
                break
            if not all(open_cells):
                raise DiagramError("All rooms must have the same depth.")
            depth += 1
        return depth

    @staticmethod
    def _piece(ch: str) -> PieceType | None:
        return None if ch == FLOOR else PieceType(ch)

    @staticmethod
    def _symbol(piece: PieceType | None) -> str:
        return FLOOR if piece is None else piece.value
