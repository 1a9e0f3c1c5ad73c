"""
Monte-Carlo difficulty estimate for a coloring puzzle.

The graph is relabeled by a seeded random permutation many times; each time
the greedy heuristic colors it and we record whether it hit the known optimum.
The score is the fraction of misses: 0 means greedy always finds the optimum
(easy), values near 1 mean it almost never does (hard).
"""
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from colorpuzzle.cancellation import Token, check_cancelled
from colorpuzzle.graphs.graph import Graph, relabel, strip_dangling as _strip_dangling
from colorpuzzle.coloring.greedy import solve_greedy
from colorpuzzle.coloring.validate import count_colors

log = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10_000


@dataclass
class EstimatorConfig:
    iterations: int = DEFAULT_ITERATIONS
    seed: int = 0
    strip_dangling: bool = True

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "EstimatorConfig":
        """Build from a loaded config; `estimator.seed` wins over the top-level `seed`."""
        params = {"seed": cfg.get("seed", 0)}
        params.update(cfg.get("estimator") or {})
        return cls(**params)


def shuffled_mapping(n: int, rng: random.Random) -> List[int]:
    """Fisher-Yates over range(n), drawing from rng for i = n-1 down to 1."""
    mapping = list(range(n))
    for i in range(n - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        mapping[i], mapping[j] = mapping[j], mapping[i]
    return mapping


def shuffle_graph(graph: Graph, rng: random.Random) -> Graph:
    return relabel(graph, shuffled_mapping(len(graph), rng))


def estimate_complexity(
    graph: Graph,
    optimal: int,
    iterations: int = DEFAULT_ITERATIONS,
    seed: int = 0,
    *,
    strip_dangling: bool = True,
    token: Optional[Token] = None,
) -> float:
    """
    Return 1 - (greedy hits on `optimal`) / iterations, a value in [0, 1].

    `optimal` is the chromatic number of `graph` (see solve_exact). With
    strip_dangling, nodes of degree < 2 are peeled off first. A peeled node
    always has a free color once two colors exist, so `optimal` still holds
    for what remains. An empty graph to sample scores 0.0. The generator is
    created here from `seed`, so equal inputs always give equal scores.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    sample = _strip_dangling(graph) if strip_dangling else graph
    if not sample:
        log.debug("estimate_complexity: nothing left to sample (n=%d), score 0", len(graph))
        return 0.0

    rng = random.Random(seed)
    hits = 0
    for _ in range(iterations):
        check_cancelled(token, "complexity estimation")
        greedy = count_colors(solve_greedy(shuffle_graph(sample, rng)))
        if greedy == optimal:
            hits += 1

    score = 1 - hits / iterations
    log.debug(
        "estimate_complexity: n=%d sampled=%d optimal=%d hits=%d/%d score=%.4f",
        len(graph), len(sample), optimal, hits, iterations, score,
    )
    return score


def estimate_with_config(
    graph: Graph,
    optimal: int,
    cfg: EstimatorConfig,
    token: Optional[Token] = None,
) -> float:
    return estimate_complexity(
        graph,
        optimal,
        cfg.iterations,
        cfg.seed,
        strip_dangling=cfg.strip_dangling,
        token=token,
    )
