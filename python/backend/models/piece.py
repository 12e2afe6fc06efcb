"""Piece types that live in the burrow."""

from __future__ import annotations

from enum import StrEnum


class PieceType(StrEnum):
    """A piece is identified by its diagram symbol."""

    AMBER = "A"
    BRONZE = "B"
    COPPER = "C"
    DESERT = "D"

    @property
    def step_cost(self) -> int:
        return _STEP_COSTS[self]

    @property
    def home_room(self) -> int:
        """Index of the room this piece must end up in."""
        return _HOME_ROOMS[self]


_STEP_COSTS = {
    PieceType.AMBER: 1,
    PieceType.BRONZE: 10,
    PieceType.COPPER: 100,
    PieceType.DESERT: 1000,
}

_HOME_ROOMS = {piece: idx for idx, piece in enumerate(PieceType)}
