from __future__ import annotations


class ColoringError(Exception):
    """Base class for every error raised by colorpuzzle."""


class ColoringInvariantError(ColoringError, RuntimeError):
    """
    The exact solver tried every budget k = 1..N without finding a coloring.
    Only reachable with a malformed graph (asymmetric or out-of-range adjacency).
    """


class UnknownRegionError(ColoringError, KeyError):
    """An edge references a region id that is not part of the puzzle."""

    def __init__(self, region_id: str, edge: tuple[str, str] | None = None):
        where = f"Edge {edge!r} references" if edge else "Assignment references"
        super().__init__(f"{where} unknown region '{region_id}'")
        self.region_id = region_id
        self.edge = edge

    def __str__(self) -> str:
        return self.args[0]


class Cancelled(ColoringError):
    """Raised at a loop boundary when a cancellation token fires. Not a failure."""
