"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to show the burrow, solve it and
report the minimal energy.
"""

from __future__ import annotations

import sys

from backend.engine.diagram import Diagram
from backend.engine.solver import Solver
from backend.models.burrow import Burrow


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    m, s = divmod(seconds, 60)
    return f"{int(m)}:{s:05.2f}" if m >= 1 else f"{s:.2f}s"


# -- burrow rendering ---------------------------------------------------------


def _render_burrow(burrow: Burrow, color: bool) -> str:
    """Return the diagram, with pieces dimmed or highlighted when *color*."""
    text = Diagram.render(burrow)
    if not color:
        return text.rstrip("\n")
    out: list[str] = []
    for ch in text.rstrip("\n"):
        if ch == "#":
            out.append(f"{_DIM}#{_R}")
        elif ch.isalpha():
            out.append(f"{_C}{ch}{_R}")
        else:
            out.append(ch)
    return "".join(out)


# -- entry point --------------------------------------------------------------


def run(burrow: Burrow, *, max_expansions: int | None = None) -> int:
    """Print *burrow*, solve it and print the minimal energy."""
    color = sys.stdout.isatty()
    search = Solver.search(burrow, max_expansions=max_expansions)
    stats = search.stats

    print(_render_burrow(burrow, color))
    print()
    if color:
        print(f"  Minimal energy: {_G}{search.cost}{_R}")
        print(
            f"  {_DIM}{stats.expanded} expanded, {stats.interned} states, "
            f"{_format_time(stats.elapsed_time)}{_R}"
        )
    else:
        print(f"  Minimal energy: {search.cost}")
        print(
            f"  {stats.expanded} expanded, {stats.interned} states, "
            f"{_format_time(stats.elapsed_time)}"
        )
    return search.cost
