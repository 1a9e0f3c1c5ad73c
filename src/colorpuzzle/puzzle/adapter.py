from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from colorpuzzle.errors import UnknownRegionError
from colorpuzzle.graphs.graph import Graph, make_graph
from colorpuzzle.coloring.validate import UNCOLORED, Coloring

Edge = Tuple[str, str]


@dataclass
class PuzzleGraph:
    graph: Graph
    index_of: Dict[str, int]
    id_of: List[str]


def to_graph(region_ids: Sequence[str], edges: Iterable[Edge]) -> PuzzleGraph:
    """
    Map region ids to nodes 0..N-1 (in the order given) and build the
    neighbor graph. Reversed or repeated edges collapse into one.
    Every edge is checked before the graph is built.
    """
    index_of: Dict[str, int] = {}
    for rid in region_ids:
        if rid in index_of:
            raise ValueError(f"Duplicate region id '{rid}'")
        index_of[rid] = len(index_of)

    int_edges: List[Tuple[int, int]] = []
    for edge in edges:
        a, b = edge
        for rid in (a, b):
            if rid not in index_of:
                raise UnknownRegionError(rid, (a, b))
        if a == b:
            raise ValueError(f"Region '{a}' cannot neighbor itself")
        int_edges.append((index_of[a], index_of[b]))

    return PuzzleGraph(
        graph=make_graph(len(index_of), int_edges),
        index_of=index_of,
        id_of=list(region_ids),
    )


def coloring_to_domain(coloring: Sequence[int], id_of: Sequence[str]) -> Dict[str, int]:
    if len(coloring) != len(id_of):
        raise ValueError(f"Coloring has {len(coloring)} entries for {len(id_of)} regions")
    return {id_of[i]: c for i, c in enumerate(coloring)}


def domain_to_coloring(assignment: Mapping[str, int], index_of: Mapping[str, int]) -> Coloring:
    """Regions missing from `assignment` come back as UNCOLORED; unknown ids are rejected."""
    coloring = [UNCOLORED] * len(index_of)
    for rid, color in assignment.items():
        if rid not in index_of:
            raise UnknownRegionError(rid)
        coloring[index_of[rid]] = color
    return coloring
