from __future__ import annotations
from typing import List, Sequence

from colorpuzzle.graphs.graph import Graph

UNCOLORED = -1

Coloring = List[int]


def count_colors(coloring: Sequence[int]) -> int:
    """1 + the largest color index used; 0 for an empty coloring."""
    return max(coloring, default=UNCOLORED) + 1


def is_complete(coloring: Sequence[int]) -> bool:
    return all(c != UNCOLORED for c in coloring)


def conflicting_nodes(graph: Graph, coloring: Sequence[int]) -> List[int]:
    """
    Colored nodes that share their color with at least one neighbor.
    Uncolored nodes never conflict, so this also works on partial colorings.
    """
    if len(coloring) != len(graph):
        raise ValueError(f"Coloring has {len(coloring)} entries, graph has {len(graph)} nodes")
    return [
        i for i, nbrs in enumerate(graph)
        if coloring[i] != UNCOLORED and any(coloring[j] == coloring[i] for j in nbrs)
    ]


def is_valid_coloring(graph: Graph, coloring: Sequence[int]) -> bool:
    """Complete (no UNCOLORED, no negative colors) and proper."""
    if len(coloring) != len(graph):
        return False
    if any(c < 0 for c in coloring):
        return False
    return not conflicting_nodes(graph, coloring)
