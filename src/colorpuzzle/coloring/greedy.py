from __future__ import annotations
from typing import Optional

from colorpuzzle.registry import SOLVERS
from colorpuzzle.cancellation import Token, check_cancelled
from colorpuzzle.graphs.graph import Graph
from colorpuzzle.coloring.validate import UNCOLORED, Coloring


@SOLVERS.register("greedy")
def solve_greedy(graph: Graph, token: Optional[Token] = None) -> Coloring:
    """
    First-fit coloring in index order.
    Only lower-index neighbors are colored when node i is visited; the rest
    still hold UNCOLORED, which never equals a real color.
    Uses at most max_degree + 1 colors, with no optimality guarantee.
    The pass is a single sweep, so the token is checked once before it.
    """
    check_cancelled(token, "greedy coloring")
    coloring = [UNCOLORED] * len(graph)
    for i, nbrs in enumerate(graph):
        used = {coloring[j] for j in nbrs}
        c = 0
        while c in used:
            c += 1
        coloring[i] = c
    return coloring
