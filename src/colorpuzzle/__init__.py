"""Graph-coloring solver and difficulty estimator for map-coloring puzzles."""
from colorpuzzle.errors import Cancelled, ColoringError, ColoringInvariantError, UnknownRegionError
from colorpuzzle.cancellation import CancelToken, DeadlineToken
from colorpuzzle.graphs import Graph, graph_from_labeled_edges, is_valid_graph, make_graph, strip_dangling
from colorpuzzle.coloring import UNCOLORED, Coloring, chromatic_number, count_colors, is_valid_coloring, solve_exact, solve_greedy
from colorpuzzle.complexity import EstimatorConfig, estimate_complexity
from colorpuzzle.puzzle import Level, LevelReport, analyze_level, coloring_to_domain, to_graph
from colorpuzzle.runner import Outcome, run_cancellable, submit_estimate, submit_solve

__version__ = "0.1.0"
