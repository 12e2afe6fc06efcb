"""Rich terminal frontend — coloured diagram, statistics table and result.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.diagram import Diagram
from backend.engine.searchstate import SearchStats
from backend.engine.solver import Solver
from backend.models.burrow import Burrow
from backend.models.piece import PieceType

console = Console()

_PIECE_STYLES = {
    PieceType.AMBER: "bold yellow",
    PieceType.BRONZE: "bold dark_orange3",
    PieceType.COPPER: "bold red",
    PieceType.DESERT: "bold magenta",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}"


# -- burrow rendering ---------------------------------------------------------


def _render_burrow(burrow: Burrow) -> Text:
    """Return the diagram as styled text."""
    text = Text()
    for ch in Diagram.render(burrow).rstrip("\n"):
        if ch == "#":
            text.append(ch, style="bright_blue")
        elif ch == ".":
            text.append("·", style="dim")
        elif ch in _PIECE_STYLES:
            text.append(ch, style=_PIECE_STYLES[PieceType(ch)])
        else:
            text.append(ch)
    return text


def _render_stats(stats: SearchStats) -> Table:
    table = Table(
        show_header=False,
        box=rich.box.SIMPLE,
        padding=(0, 1),
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold white")
    table.add_row("Expanded", f"{stats.expanded:,}")
    table.add_row("Generated", f"{stats.generated:,}")
    table.add_row("Duplicates", f"{stats.duplicates:,}")
    table.add_row("Stale pops", f"{stats.stale:,}")
    table.add_row("Peak queue", f"{stats.peak_open:,}")
    table.add_row("States", f"{stats.interned:,}")
    table.add_row("Time", _format_time(stats.elapsed_time))
    return table


# -- entry point --------------------------------------------------------------


def run(burrow: Burrow, *, max_expansions: int | None = None) -> int:
    """Show *burrow*, solve it with a spinner and print the result."""
    layout = burrow.layout
    with console.status("[cyan]Searching…[/cyan]"):
        search = Solver.search(burrow, max_expansions=max_expansions)

    result = Text()
    result.append("  Minimal energy: ", style="dim")
    result.append(f"{search.cost:,}", style="bold green")

    body = Group(
        Align.center(_render_burrow(burrow)),
        Text(""),
        Align.center(_render_stats(search.stats)),
        Align.center(result),
    )
    panel = Panel(
        body,
        title=(
            f"[bold]Burrow[/bold]  [dim]{layout.room_count} rooms × "
            f"{layout.depth} deep[/dim]"
        ),
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))
    return search.cost
