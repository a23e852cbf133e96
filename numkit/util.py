"""Utility constants and helpers for numkit.

Interval type names and the brackets used to render each of them.
These are used throughout the API for consistent interval representation.
"""

from typing import Literal, TypeAlias

IntervalType: TypeAlias = Literal["closed", "open", "lopen", "ropen"]

# Interval type names
CLOSED: IntervalType = "closed"
OPEN: IntervalType = "open"
LOPEN: IntervalType = "lopen"
ROPEN: IntervalType = "ropen"

INTERVAL_TYPES: tuple[IntervalType, ...] = (CLOSED, OPEN, LOPEN, ROPEN)

# (left, right) bracket for each interval type
BRACKETS: dict[IntervalType, tuple[str, str]] = {
    CLOSED: ("[", "]"),
    OPEN: ("(", ")"),
    LOPEN: ("(", "]"),
    ROPEN: ("[", ")"),
}
