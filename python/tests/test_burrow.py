"""Burrow model: layout constants, validation and immutable transitions."""

from __future__ import annotations

import pytest

from backend.models.burrow import Burrow, Layout
from backend.models.piece import PieceType

A, B, C, D = PieceType


def test_piece_attributes() -> None:
    assert [p.step_cost for p in PieceType] == [1, 10, 100, 1000]
    assert [p.home_room for p in PieceType] == [0, 1, 2, 3]
    assert PieceType("C") is C


def test_layout_geometry() -> None:
    layout = Layout(room_count=4, depth=2)

    assert layout.corridor_length == 11
    assert [layout.entrance(r) for r in range(4)] == [2, 4, 6, 8]
    assert [p for p in range(11) if layout.is_stop(p)] == [0, 1, 3, 5, 7, 9, 10]
    assert layout.homes == (A, B, C, D)


@pytest.mark.parametrize("rooms, depth", [(0, 1), (5, 1), (2, 0)])
def test_layout_rejects_impossible_shapes(rooms: int, depth: int) -> None:
    with pytest.raises(ValueError):
        Layout(room_count=rooms, depth=depth)


def test_goal_fills_every_room_with_its_home_type() -> None:
    goal = Layout(room_count=3, depth=4).goal()

    assert goal.corridor == (None,) * 9
    assert goal.rooms == ((A,) * 4, (B,) * 4, (C,) * 4)
    assert goal.is_solved()


def test_equality_ignores_layout_identity() -> None:
    first = Burrow.from_rooms([["A", "B"], ["B", "A"]])
    second = Burrow.from_rooms([[A, B], [B, A]])

    assert first == second
    assert hash(first) == hash(second)
    assert first != Burrow.from_rooms([["B", "A"], ["A", "B"]])


def test_queries_do_not_mutate() -> None:
    burrow = Burrow.from_rooms(
        [["A"], ["B", "A"]],
        corridor=[None, B, None, None, None, None, None],
        depth=2,
    )

    assert burrow.corridor_at(1) is B
    assert burrow.corridor_at(0) is None
    assert burrow.top_of(1) is A
    assert burrow.top_of(0) is A
    assert burrow.is_settled(0)
    assert not burrow.is_settled(1)


def test_empty_room_is_settled_and_has_no_top() -> None:
    burrow = Burrow.from_rooms(
        [[], ["B", "B"]],
        corridor=[A, A, None, None, None, None, None],
        depth=2,
    )
    assert burrow.top_of(0) is None
    assert burrow.is_settled(0)


def test_transitions_return_new_snapshots() -> None:
    start = Burrow.from_rooms([["A", "B"], ["B", "A"]])

    parked = start.exit_to(0, 3)
    assert parked.corridor_at(3) is B
    assert parked.rooms == ((A,), (B, A))
    assert start.rooms == ((A, B), (B, A))

    home = parked.exit_to(1, 5).enter_from(3)
    assert home.rooms == ((A,), (B, B))
    assert home.corridor == (None, None, None, None, None, A, None)


def test_from_rooms_validation() -> None:
    with pytest.raises(ValueError, match="corridor of 7 cells"):
        Burrow.from_rooms([["A"], ["B"]], corridor=[None] * 11)
    with pytest.raises(ValueError, match="entrance"):
        Burrow.from_rooms([["A"], []], corridor=[None, None, None, None, B, None, None])
    with pytest.raises(ValueError, match="only 1 deep"):
        Burrow.from_rooms([["A", "A"], ["B"]], depth=1)
    with pytest.raises(ValueError, match="no home room"):
        Burrow.from_rooms([["A", "C"], ["B", "B"]])


def test_transitions_reject_illegal_relocations() -> None:
    burrow = Burrow.from_rooms(
        [[], ["B", "B"]],
        corridor=[A, None, None, None, None, None, A],
        depth=2,
    )
    with pytest.raises(ValueError, match="Room 0 is empty"):
        burrow.exit_to(0, 1)
    with pytest.raises(ValueError, match="not a free stop"):
        burrow.exit_to(1, 0)
    with pytest.raises(ValueError, match="not a free stop"):
        burrow.exit_to(1, 4)
    with pytest.raises(ValueError, match="cell 3 is empty"):
        burrow.enter_from(3)

    full = Burrow.from_rooms(
        [["A", "A"], ["B", "B"]],
        corridor=[None, None, None, None, None, B, None],
    )
    with pytest.raises(ValueError, match="Room 1 is full"):
        full.enter_from(5)
