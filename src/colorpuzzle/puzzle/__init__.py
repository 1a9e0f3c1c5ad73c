from colorpuzzle.puzzle.adapter import PuzzleGraph, coloring_to_domain, domain_to_coloring, to_graph
from colorpuzzle.puzzle.level import (
    Level,
    LevelReport,
    analyze_level,
    error_regions,
    format_complexity,
    is_solved,
    load_level,
    save_report,
)
