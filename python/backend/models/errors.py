"""Exceptions raised by the burrow backend."""

from __future__ import annotations


class DiagramError(ValueError):
    """The input diagram is not a well-formed burrow."""


class SearchExhaustedError(RuntimeError):
    """The search ran out of states (or budget) before reaching the goal."""
