#!/usr/bin/env python3
"""Burrow organiser — minimal energy to sort the pieces into their rooms.

Usage::

    python main.py input.txt                  # folded diagram, vanilla output
    python main.py input.txt -p second        # unfolded (deep) variant
    python main.py input.txt -f rich -v       # Rich output with search logs
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.diagram import Diagram  # noqa: E402
from backend.models.errors import DiagramError, SearchExhaustedError  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Variant(StrEnum):
    first = "first"
    second = "second"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _load(path: Path, variant: Variant):
    text = path.read_text()
    if variant is Variant.second:
        text = Diagram.unfold(text)
    return Diagram.parse(text)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True, metavar="INPUT",
        help="Diagram file to solve.",
    ),
    variant: Variant = typer.Option(
        Variant.first, "-p", "--variant",
        help="'second' inserts the two hidden rows before solving.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the result.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1, envvar="BURROW_MAX_EXPANSIONS",
        help="Give up after this many expanded states.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Burrow organiser."""
    _configure_logging(verbose)

    try:
        burrow = _load(path, variant)
    except DiagramError as exc:
        typer.echo(f"Invalid diagram: {exc}", err=True)
        raise typer.Exit(code=2)

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(burrow, max_expansions=max_expansions)
    except SearchExhaustedError as exc:
        typer.echo(f"No solution: {exc}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
