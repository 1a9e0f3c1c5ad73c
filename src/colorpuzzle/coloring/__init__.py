from colorpuzzle.coloring.validate import (
    UNCOLORED,
    Coloring,
    conflicting_nodes,
    count_colors,
    is_complete,
    is_valid_coloring,
)
from colorpuzzle.coloring.greedy import solve_greedy
from colorpuzzle.coloring.exact import chromatic_number, color_with_budget, solve_exact
