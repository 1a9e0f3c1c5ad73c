# Exact minimum coloring by iterative deepening on the color budget k.
#
# For a fixed k the search is an explicit-cursor backtracking loop instead of
# recursion: coloring[node] doubles as "last color tried" for that node, so
# stepping back to a node resumes from the next color.

from __future__ import annotations
import logging
from typing import Optional

from colorpuzzle.registry import SOLVERS
from colorpuzzle.errors import ColoringInvariantError
from colorpuzzle.cancellation import Token, check_cancelled
from colorpuzzle.graphs.graph import Graph
from colorpuzzle.coloring.validate import UNCOLORED, Coloring, count_colors

log = logging.getLogger(__name__)

# Steps between cancellation checks inside a single budget.
CHECK_EVERY = 10_000


def color_with_budget(graph: Graph, k: int, token: Optional[Token] = None) -> Coloring | None:
    """
    Return a coloring of `graph` with colors in [0, k), or None if none exists.
    Nodes are visited in index order and colors tried in ascending order, so
    the result is deterministic for a given adjacency encoding.
    """
    n = len(graph)
    coloring = [UNCOLORED] * n
    node = 0
    steps = 0

    while 0 <= node < n:
        steps += 1
        if steps % CHECK_EVERY == 0:
            check_cancelled(token, f"budget k={k}")

        nbrs = graph[node]
        color = coloring[node] + 1
        while color < k and any(coloring[j] == color for j in nbrs):
            color += 1

        if color < k:
            coloring[node] = color
            node += 1
        else:
            coloring[node] = UNCOLORED
            node -= 1

    log.debug("budget k=%d: %s after %d steps", k, "found" if node == n else "infeasible", steps)
    return coloring if node == n else None


@SOLVERS.register("exact")
def solve_exact(graph: Graph, token: Optional[Token] = None) -> Coloring:
    """
    Coloring with the minimum number of colors (the chromatic number).

    Tries k = 1, 2, ..., N and returns the first success. An empty graph gives
    an empty coloring. Failing every k <= N means the adjacency is malformed
    and raises ColoringInvariantError. The token is checked before each k
    and periodically inside the search; a fired token raises Cancelled.
    """
    if not graph:
        return []

    for k in range(1, len(graph) + 1):
        check_cancelled(token, f"exact solve (k={k})")
        coloring = color_with_budget(graph, k, token)
        if coloring is not None:
            return coloring

    raise ColoringInvariantError(
        f"No coloring found with up to {len(graph)} colors; graph adjacency is malformed"
    )


def chromatic_number(graph: Graph, token: Optional[Token] = None) -> int:
    return count_colors(solve_exact(graph, token))
