"""
Tests for the exact solver, the greedy heuristic and coloring validation.
"""
import networkx as nx
import pytest

import colorpuzzle.coloring.exact as exact_module
from colorpuzzle.cancellation import CancelToken
from colorpuzzle.errors import Cancelled, ColoringInvariantError
from colorpuzzle.graphs.graph import from_networkx, make_graph, max_degree, to_networkx
from colorpuzzle.coloring import (
    UNCOLORED,
    chromatic_number,
    color_with_budget,
    conflicting_nodes,
    count_colors,
    is_complete,
    is_valid_coloring,
    solve_exact,
    solve_greedy,
)
from colorpuzzle.registry import SOLVERS


KNOWN = [
    ("empty", [], 0),
    ("single", [[]], 1),
    ("isolated", make_graph(4, []), 1),
    ("edge", make_graph(2, [(0, 1)]), 2),
    ("path4", make_graph(4, [(0, 1), (1, 2), (2, 3)]), 2),
    ("triangle", make_graph(3, [(0, 1), (1, 2), (0, 2)]), 3),
    ("cycle5", from_networkx(nx.cycle_graph(5)), 3),
    ("cycle6", from_networkx(nx.cycle_graph(6)), 2),
    ("k4", from_networkx(nx.complete_graph(4)), 4),
    ("wheel5", from_networkx(nx.wheel_graph(6)), 4),
    ("petersen", from_networkx(nx.petersen_graph()), 3),
    ("two_triangles", make_graph(6, [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)]), 3),
]


def _random_graphs(count=20, n=9, p=0.4):
    return [from_networkx(nx.gnp_random_graph(n, p, seed=s)) for s in range(count)]


class TestExactSolver:
    @pytest.mark.parametrize("name, graph, chi", KNOWN, ids=[k[0] for k in KNOWN])
    def test_chromatic_number(self, name, graph, chi):
        coloring = solve_exact(graph)
        assert count_colors(coloring) == chi
        assert is_valid_coloring(graph, coloring)

    def test_empty_graph_gives_empty_coloring(self):
        assert solve_exact([]) == []
        assert chromatic_number([]) == 0

    def test_triangle_uses_three_distinct_colors(self, triangle):
        assert solve_exact(triangle) == [0, 1, 2]

    def test_path_alternates(self, path4):
        assert solve_exact(path4) == [0, 1, 0, 1]

    def test_deterministic(self):
        for g in _random_graphs(5):
            assert solve_exact(g) == solve_exact(g)

    def test_never_worse_than_networkx_greedy(self):
        for g in _random_graphs():
            nx_coloring = nx.greedy_color(to_networkx(g), strategy="largest_first")
            assert chromatic_number(g) <= max(nx_coloring.values()) + 1

    def test_budget_infeasible_returns_none(self, triangle):
        assert color_with_budget(triangle, 2) is None
        assert color_with_budget(triangle, 3) == [0, 1, 2]

    def test_exhausted_budgets_raise_invariant_error(self, triangle, monkeypatch):
        monkeypatch.setattr(exact_module, "color_with_budget", lambda g, k, token=None: None)
        with pytest.raises(ColoringInvariantError):
            solve_exact(triangle)

    def test_cancelled_token_aborts(self, cycle5):
        token = CancelToken()
        token.cancel()
        with pytest.raises(Cancelled):
            solve_exact(cycle5, token)

    def test_does_not_mutate_input(self, cycle5):
        before = [list(n) for n in cycle5]
        solve_exact(cycle5)
        assert cycle5 == before


class TestGreedy:
    def test_known_graphs_valid(self):
        for _, graph, chi in KNOWN:
            coloring = solve_greedy(graph)
            assert is_valid_coloring(graph, coloring)
            assert count_colors(coloring) >= chi

    def test_upper_bounds(self):
        for g in _random_graphs():
            greedy = count_colors(solve_greedy(g))
            assert chromatic_number(g) <= greedy <= max_degree(g) + 1

    def test_bad_order_is_suboptimal(self):
        # path a-b-c-d numbered a=0, d=1, b=2, c=3: both ends get color 0 first
        g = make_graph(4, [(0, 2), (2, 3), (3, 1)])
        assert solve_greedy(g) == [0, 0, 1, 2]
        assert chromatic_number(g) == 2

    def test_two_triangles(self, two_triangles):
        assert count_colors(solve_greedy(two_triangles)) >= chromatic_number(two_triangles) == 3

    def test_registered(self):
        assert SOLVERS.get("greedy") is solve_greedy
        assert SOLVERS.get("exact") is solve_exact
        with pytest.raises(KeyError):
            SOLVERS.get("dsatur")


class TestValidation:
    def test_count_colors(self):
        assert count_colors([]) == 0
        assert count_colors([0, 0]) == 1
        assert count_colors([2, 0, 1]) == 3

    def test_conflicts_ignore_uncolored(self, triangle):
        assert conflicting_nodes(triangle, [0, UNCOLORED, UNCOLORED]) == []
        assert conflicting_nodes(triangle, [0, 0, UNCOLORED]) == [0, 1]

    def test_conflicts_length_mismatch(self, triangle):
        with pytest.raises(ValueError):
            conflicting_nodes(triangle, [0, 1])

    def test_is_valid_coloring(self, triangle):
        assert is_valid_coloring(triangle, [0, 1, 2])
        assert not is_valid_coloring(triangle, [0, 1, 1])
        assert not is_valid_coloring(triangle, [0, 1, UNCOLORED])
        assert not is_valid_coloring(triangle, [0, 1])

    def test_is_complete(self):
        assert is_complete([0, 1])
        assert not is_complete([0, UNCOLORED])


class _FiresOnSecondCheck:
    """Lets the per-budget check pass, then cancels on the next one."""

    def __init__(self):
        self.checks = 0

    @property
    def cancelled(self):
        self.checks += 1
        return self.checks > 1


def test_cancelled_inside_a_single_budget(cycle5, monkeypatch):
    monkeypatch.setattr(exact_module, "CHECK_EVERY", 1)
    token = _FiresOnSecondCheck()
    with pytest.raises(Cancelled, match="budget k=1"):
        solve_exact(cycle5, token)
    assert token.checks == 2


def test_greedy_honours_cancelled_token(triangle):
    token = CancelToken()
    token.cancel()
    with pytest.raises(Cancelled):
        solve_greedy(triangle, token)
