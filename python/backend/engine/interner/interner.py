"""Dense integer identities for burrow configurations."""

from __future__ import annotations

from backend.models.burrow import Burrow


class StateInterner:
    """Two-way table between configurations and small integer ids.

    Ids are handed out in order of first sight starting at ``0`` and are
    never reused, so they can index plain lists.
    """

    def __init__(self) -> None:
        self._ids: dict[Burrow, int] = {}
        self._states: list[Burrow] = []

    def intern(self, burrow: Burrow) -> int:
        """Return the id of *burrow*, allocating one on first sight."""
        state_id = self._ids.get(burrow)
        if state_id is None:
            state_id = len(self._states)
            self._ids[burrow] = state_id
            self._states.append(burrow)
        return state_id

    def lookup(self, state_id: int) -> Burrow:
        return self._states[state_id]

    def __contains__(self, burrow: object) -> bool:
        return burrow in self._ids

    def __len__(self) -> int:
        return len(self._states)
