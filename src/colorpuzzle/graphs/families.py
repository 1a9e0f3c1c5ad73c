from __future__ import annotations
import math
from typing import Any
import networkx as nx
from colorpuzzle.registry import GRAPH_FAMILIES
from colorpuzzle.graphs.graph import Graph, from_networkx

# Every family takes a target node count n and returns an adjacency-list Graph.
# Lattice families round n to the nearest shape they can build.

@GRAPH_FAMILIES.register("erdos_renyi")
def erdos_renyi(n: int, p: float = 0.1, seed: int | None = None) -> Graph:
    return from_networkx(nx.gnp_random_graph(n=n, p=p, seed=seed, directed=False))

@GRAPH_FAMILIES.register("watts_strogatz")
def watts_strogatz(n: int, k: int = 4, p: float = 0.2, seed: int | None = None) -> Graph:
    k = min(k if k % 2 == 0 else k + 1, n - (n % 2 == 1))
    k = max(2, min(k, n - 1))
    return from_networkx(nx.watts_strogatz_graph(n=n, k=k, p=p, seed=seed))

@GRAPH_FAMILIES.register("barabasi_albert")
def barabasi_albert(n: int, m: int = 2, seed: int | None = None) -> Graph:
    m = max(1, min(m, n - 1))
    return from_networkx(nx.barabasi_albert_graph(n=n, m=m, seed=seed))

@GRAPH_FAMILIES.register("random_regular")
def random_regular(n: int, d: int = 3, seed: int | None = None) -> Graph:
    d = max(0, min(d, n - 1))
    if (n * d) % 2 == 1:
        d = max(0, d - 1)
    return from_networkx(nx.random_regular_graph(d=d, n=n, seed=seed))

@GRAPH_FAMILIES.register("random_tree")
def random_tree(n: int, seed: int | None = None) -> Graph:
    if n <= 0:
        return []
    return from_networkx(nx.random_labeled_tree(n, seed=seed))

@GRAPH_FAMILIES.register("cycle")
def cycle(n: int, **_: Any) -> Graph:
    return from_networkx(nx.cycle_graph(n))

@GRAPH_FAMILIES.register("complete")
def complete(n: int, **_: Any) -> Graph:
    return from_networkx(nx.complete_graph(n))

@GRAPH_FAMILIES.register("random_bipartite")
def random_bipartite(n: int, p: float = 0.2, seed: int | None = None) -> Graph:
    n1 = n // 2
    n2 = n - n1
    return from_networkx(nx.bipartite.random_graph(n1, n2, p=p, seed=seed))

@GRAPH_FAMILIES.register("grid")
def grid(n: int, **_: Any) -> Graph:
    """Square-ish grid of rectangular regions (4-neighborhood)."""
    rows = max(1, int(math.sqrt(n)))
    cols = max(1, n // rows)
    return from_networkx(nx.grid_2d_graph(rows, cols))

@GRAPH_FAMILIES.register("triangular_lattice")
def triangular_lattice(n: int, **_: Any) -> Graph:
    """Map-like planar lattice where most interior regions touch six others."""
    rows = max(1, int(math.sqrt(n)))
    cols = max(1, n // rows)
    return from_networkx(nx.triangular_lattice_graph(rows, cols))
