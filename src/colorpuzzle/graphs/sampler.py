from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List
import random
from colorpuzzle.registry import GRAPH_FAMILIES
from colorpuzzle.graphs.graph import Graph

@dataclass
class GraphSourceSpec:
    family: str
    params: Dict[str, Any]
    weight: float

class GraphSampler:
    def __init__(self, sources: List[GraphSourceSpec], seed: int = 0):
        if not sources:
            raise ValueError("GraphSampler needs at least one source")
        self.sources = sources
        self.rng = random.Random(seed)
        weights = [s.weight for s in sources]
        s = sum(weights) if sum(weights) > 0 else 1.0
        self.weights = [w / s for w in weights]

    def sample(self, n: int, seed: int | None = None) -> tuple[str, Graph]:
        spec = self.rng.choices(self.sources, weights=self.weights, k=1)[0]
        fn = GRAPH_FAMILIES.get(spec.family)
        kwargs = dict(spec.params)
        kwargs["seed"] = seed
        return spec.family, fn(n=n, **kwargs)
