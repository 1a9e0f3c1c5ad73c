from __future__ import annotations
import json
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Mapping, Optional, Tuple

from colorpuzzle.cancellation import Token
from colorpuzzle.coloring.exact import solve_exact
from colorpuzzle.coloring.validate import conflicting_nodes, count_colors, is_complete
from colorpuzzle.complexity.estimator import EstimatorConfig, estimate_with_config
from colorpuzzle.graphs.graph import num_edges
from colorpuzzle.puzzle.adapter import PuzzleGraph, coloring_to_domain, domain_to_coloring, to_graph

log = logging.getLogger(__name__)


@dataclass
class Level:
    region_ids: List[str]
    edges: List[Tuple[str, str]] = field(default_factory=list)

    def puzzle_graph(self) -> PuzzleGraph:
        return to_graph(self.region_ids, self.edges)


@dataclass
class LevelReport:
    solution: Dict[str, int]
    colors: int
    complexity: float
    num_regions: int
    num_edges: int

    @property
    def complexity_label(self) -> str:
        return format_complexity(self.complexity)


def format_complexity(score: float) -> str:
    return f"{round(100 * score)}/100"


def analyze_level(
    level: Level,
    cfg: Optional[EstimatorConfig] = None,
    token: Optional[Token] = None,
) -> LevelReport:
    """Exact solution, its color count and the difficulty score for one level."""
    cfg = cfg or EstimatorConfig()
    pg = level.puzzle_graph()
    coloring = solve_exact(pg.graph, token)
    colors = count_colors(coloring)
    complexity = estimate_with_config(pg.graph, colors, cfg, token)
    log.info(
        "Analyzed level: regions=%d edges=%d colors=%d complexity=%s",
        len(pg.graph), num_edges(pg.graph), colors, format_complexity(complexity),
    )
    return LevelReport(
        solution=coloring_to_domain(coloring, pg.id_of),
        colors=colors,
        complexity=complexity,
        num_regions=len(pg.graph),
        num_edges=num_edges(pg.graph),
    )


def error_regions(level: Level, assignment: Mapping[str, int]) -> List[str]:
    """Colored regions sharing their color with a neighbor, in region order."""
    pg = level.puzzle_graph()
    coloring = domain_to_coloring(assignment, pg.index_of)
    return [pg.id_of[i] for i in conflicting_nodes(pg.graph, coloring)]


def is_solved(level: Level, assignment: Mapping[str, int]) -> bool:
    """Every region colored and no two neighbors share a color."""
    pg = level.puzzle_graph()
    coloring = domain_to_coloring(assignment, pg.index_of)
    return is_complete(coloring) and not conflicting_nodes(pg.graph, coloring)


# -----------------------------------------------------------
# JSON helpers
# -----------------------------------------------------------

def load_level(path: str) -> Level:
    """
    Read a level file: {"regions": [...], "edges": [[a, b], ...]}.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        regions = [str(r) for r in data["regions"]]
        edges = [(str(a), str(b)) for (a, b) in data.get("edges", [])]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed level file {path!r}: {e}") from e
    return Level(region_ids=regions, edges=edges)


def save_report(report: LevelReport, path: str) -> None:
    blob = asdict(report)
    blob["complexity_label"] = report.complexity_label
    with open(path, "w", encoding="utf-8") as f:
        json.dump(blob, f, indent=2)
