from __future__ import annotations
import copy
from typing import Any, Dict

import yaml

DEFAULTS: Dict[str, Any] = {
    "seed": 0,
    "estimator": {
        "iterations": 10_000,
        "strip_dangling": True,
    },
    "dataset": {
        "cache_path": "data/puzzles.jsonl",
        "num_graphs": 200,
        "n_nodes": 12,
        "sources": [{"family": "triangular_lattice", "params": {}, "weight": 1.0}],
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: str | None) -> Dict[str, Any]:
    """Read a YAML config and lay it over DEFAULTS. None gives the defaults."""
    if path is None:
        return copy.deepcopy(DEFAULTS)
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse config {path!r}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path!r} must be a mapping, got {type(raw).__name__}")
    return _merge(DEFAULTS, raw)
