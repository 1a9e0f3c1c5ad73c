from __future__ import annotations
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple
import json
import logging
import os
import numpy as np
import pandas as pd
from tqdm import tqdm

from colorpuzzle.graphs.graph import Graph, edge_list, make_graph, max_degree, num_edges
from colorpuzzle.graphs.sampler import GraphSampler, GraphSourceSpec
from colorpuzzle.coloring.exact import solve_exact
from colorpuzzle.coloring.greedy import solve_greedy
from colorpuzzle.coloring.validate import count_colors
from colorpuzzle.complexity.estimator import EstimatorConfig, estimate_with_config

log = logging.getLogger(__name__)

@dataclass
class DatasetConfig:
    cache_path: str
    num_graphs: int
    n_nodes: int
    sources: List[Dict[str, Any]]

@dataclass
class PuzzleRecord:
    graph_id: int
    family: str
    n: int
    m: int
    edges: List[Tuple[int, int]]
    chromatic_number: int
    greedy_colors: int
    max_degree: int
    complexity: float

    def graph(self) -> Graph:
        return make_graph(self.n, self.edges)

class PuzzleDataset:
    def __init__(self, records: List[PuzzleRecord], meta: Dict[str, Any] | None = None):
        self.records = records
        self.meta = meta or {}

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, idx: int) -> PuzzleRecord:
        return self.records[idx]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(r) for r in self.records])

    def summary(self) -> Dict[str, float]:
        if not self.records:
            return {"count": 0}
        scores = np.array([r.complexity for r in self.records], dtype=np.float64)
        chi = np.array([r.chromatic_number for r in self.records], dtype=np.float64)
        return {
            "count": len(self.records),
            "complexity_mean": float(scores.mean()),
            "complexity_std": float(scores.std()),
            "chromatic_mean": float(chi.mean()),
            "greedy_suboptimal_frac": float(np.mean([r.greedy_colors > r.chromatic_number for r in self.records])),
        }

def label_graph(graph_id: int, family: str, graph: Graph, est: EstimatorConfig) -> PuzzleRecord:
    chi = count_colors(solve_exact(graph))
    return PuzzleRecord(
        graph_id=graph_id,
        family=family,
        n=len(graph),
        m=num_edges(graph),
        edges=edge_list(graph),
        chromatic_number=chi,
        greedy_colors=count_colors(solve_greedy(graph)),
        max_degree=max_degree(graph),
        complexity=estimate_with_config(graph, chi, est),
    )

# top-level so it pickles for ProcessPoolExecutor
def _label_one(args: Tuple[int, str, Graph, EstimatorConfig]) -> PuzzleRecord:
    return label_graph(*args)

def _write_record(f, rec: PuzzleRecord, records: List[PuzzleRecord], pbar) -> None:
    f.write(json.dumps(asdict(rec)) + "\n")
    records.append(rec)
    pbar.update(1)
    pbar.set_postfix({"k": rec.chromatic_number, "cx": f"{rec.complexity:.2f}"})

def load_jsonl(path: str) -> List[PuzzleRecord]:
    out: List[PuzzleRecord] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            obj = json.loads(line)
            obj["edges"] = [tuple(e) for e in obj["edges"]]
            out.append(PuzzleRecord(**obj))
    return out

def build_or_load_dataset(
    *,
    cfg: DatasetConfig,
    est: EstimatorConfig,
    seed: int,
    workers: int = 1,
) -> PuzzleDataset:
    cache_dir = os.path.dirname(cfg.cache_path)
    if cache_dir:
        os.makedirs(cache_dir, exist_ok=True)
    if os.path.exists(cfg.cache_path):
        records = load_jsonl(cfg.cache_path)
        log.info("Loaded %d cached puzzles from %s", len(records), cfg.cache_path)
        return PuzzleDataset(records, meta={"n_nodes": cfg.n_nodes})

    sources = [GraphSourceSpec(**s) for s in cfg.sources]
    sampler = GraphSampler(sources, seed=seed)

    tasks = []
    for gid in range(cfg.num_graphs):
        family, graph = sampler.sample(cfg.n_nodes, seed=seed + gid)
        tasks.append((gid, family, graph, est))

    records: List[PuzzleRecord] = []
    tmp_path = cfg.cache_path + ".tmp"
    pbar = tqdm(total=cfg.num_graphs, desc="Labeling puzzles")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            if workers > 1:
                with ProcessPoolExecutor(max_workers=workers) as ex:
                    for rec in ex.map(_label_one, tasks, chunksize=8):
                        _write_record(f, rec, records, pbar)
            else:
                for rec in map(_label_one, tasks):
                    _write_record(f, rec, records, pbar)
        # only a finished run becomes the cache
        os.replace(tmp_path, cfg.cache_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        log.error("Labeling failed after %d/%d puzzles; no cache written", len(records), cfg.num_graphs)
        raise
    finally:
        pbar.close()

    log.info("Wrote %d puzzles to %s", len(records), cfg.cache_path)
    return PuzzleDataset(records, meta={"n_nodes": cfg.n_nodes})
