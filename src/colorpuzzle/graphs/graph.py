# Plain adjacency-list graphs over integer nodes 0..n-1.
#
# Every function here returns a fresh list of lists and never mutates its input.

from __future__ import annotations
import logging
from typing import Dict, Hashable, Iterable, List, Sequence, Set, Tuple

import networkx as nx

log = logging.getLogger(__name__)

Graph = List[List[int]]


# -----------------------------------------------------------
# Construction
# -----------------------------------------------------------

def make_graph(n: int, edges: Iterable[Tuple[int, int]]) -> Graph:
    """
    Build a symmetric adjacency list from n and an integer edge list.
    Self-loops and repeated edges are dropped.
    Complexity: O(n + m).
    """
    seen: List[Set[int]] = [set() for _ in range(n)]
    graph: Graph = [[] for _ in range(n)]
    for (u, v) in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"Edge ({u}, {v}) out of range for n={n}")
        if u == v or v in seen[u]:
            continue
        seen[u].add(v)
        seen[v].add(u)
        graph[u].append(v)
        graph[v].append(u)
    return graph


def graph_from_labeled_edges(
    edges: Iterable[Tuple[Hashable, Hashable]],
) -> Tuple[Graph, List[Hashable]]:
    """
    Build a graph from an edge list over arbitrary labels.
    Labels get indices in first-seen order; returns (graph, labels) where
    labels[i] is the label of node i.
    """
    index: Dict[Hashable, int] = {}
    int_edges: List[Tuple[int, int]] = []
    for (a, b) in edges:
        for label in (a, b):
            if label not in index:
                index[label] = len(index)
        int_edges.append((index[a], index[b]))
    return make_graph(len(index), int_edges), list(index)


def is_valid_graph(graph: Sequence[Sequence[int]]) -> bool:
    """In-range, no self-loops, symmetric."""
    n = len(graph)
    neighbor_sets = [set(nbrs) for nbrs in graph]
    for i, nbrs in enumerate(neighbor_sets):
        for j in nbrs:
            if not isinstance(j, int) or j < 0 or j >= n or j == i:
                return False
            if i not in neighbor_sets[j]:
                return False
    return True


# -----------------------------------------------------------
# Basic statistics
# -----------------------------------------------------------

def degrees(graph: Graph) -> List[int]:
    """Degree of every node, counting distinct neighbors."""
    return [len(set(nbrs)) for nbrs in graph]


def max_degree(graph: Graph) -> int:
    return max(degrees(graph)) if graph else 0


def num_edges(graph: Graph) -> int:
    return sum(degrees(graph)) // 2


def edge_list(graph: Graph) -> List[Tuple[int, int]]:
    """Distinct edges as (u, v) with u < v, sorted."""
    return sorted({(min(u, v), max(u, v)) for u, nbrs in enumerate(graph) for v in nbrs})


# -----------------------------------------------------------
# Transformations
# -----------------------------------------------------------

def relabel(graph: Graph, mapping: Sequence[int]) -> Graph:
    """
    Node mapping[i] receives node i's neighbor list, relabeled the same way.
    `mapping` must be a permutation of range(len(graph)).
    """
    out: Graph = [[] for _ in graph]
    for i, nbrs in enumerate(graph):
        out[mapping[i]] = [mapping[j] for j in nbrs]
    return out


def remove_nodes(graph: Graph, nodes: Iterable[int]) -> Graph:
    """
    Drop `nodes` and renumber the survivors contiguously, keeping their
    relative order. Neighbor references are shifted to the new indices.
    """
    drop = set(nodes)
    new_index: Dict[int, int] = {}
    for i in range(len(graph)):
        if i not in drop:
            new_index[i] = len(new_index)
    return [
        [new_index[j] for j in nbrs if j in new_index]
        for i, nbrs in enumerate(graph)
        if i in new_index
    ]


def strip_dangling(graph: Graph, min_degree: int = 2) -> Graph:
    """
    Repeatedly remove every node with degree < min_degree until none is left.
    Removing a node lowers its neighbors' degrees, so removal can cascade
    (a tree disappears completely).
    """
    current = graph
    rounds = 0
    while True:
        low = [i for i, d in enumerate(degrees(current)) if d < min_degree]
        if not low:
            break
        current = remove_nodes(current, low)
        rounds += 1
    log.debug("strip_dangling: %d -> %d nodes in %d rounds", len(graph), len(current), rounds)
    return current


# -----------------------------------------------------------
# networkx bridge
# -----------------------------------------------------------

def to_networkx(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(range(len(graph)))
    g.add_edges_from(edge_list(graph))
    return g


def from_networkx(g: nx.Graph) -> Graph:
    """Node i is the i-th node of g.nodes(); self-loops are dropped."""
    index = {v: i for i, v in enumerate(g.nodes())}
    return make_graph(len(index), ((index[u], index[v]) for u, v in g.edges()))
