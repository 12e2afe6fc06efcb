"""State interner: dense, stable, one-to-one ids."""

from __future__ import annotations

from backend.engine.interner import StateInterner
from backend.models.burrow import Burrow


def test_ids_are_dense_and_stable() -> None:
    interner = StateInterner()
    first = Burrow.from_rooms([["A", "B"], ["B", "A"]])
    second = first.exit_to(0, 3)

    assert interner.intern(first) == 0
    assert interner.intern(second) == 1
    assert interner.intern(first) == 0
    assert len(interner) == 2


def test_equal_values_share_an_id() -> None:
    interner = StateInterner()
    state_id = interner.intern(Burrow.from_rooms([["A", "B"], ["B", "A"]]))
    rebuilt = Burrow.from_rooms([["A", "B"], ["B", "A"]])

    assert rebuilt in interner
    assert interner.intern(rebuilt) == state_id
    assert len(interner) == 1


def test_lookup_returns_the_interned_value() -> None:
    interner = StateInterner()
    burrow = Burrow.from_rooms([["B", "A"], ["A", "B"]])
    state_id = interner.intern(burrow)

    assert interner.lookup(state_id) is burrow
    assert burrow.layout.goal() not in interner
