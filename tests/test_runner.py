"""
Tests for offloaded, cancellable solver and estimator runs.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from colorpuzzle.cancellation import CancelToken, DeadlineToken
from colorpuzzle.errors import ColoringInvariantError
from colorpuzzle.coloring.exact import solve_exact
from colorpuzzle.complexity.estimator import EstimatorConfig
from colorpuzzle.runner import run_cancellable, submit_estimate, submit_solve


def test_done(triangle):
    out = run_cancellable(solve_exact, triangle)
    assert out.ok
    assert out.status == "done"
    assert out.value == [0, 1, 2]
    assert out.error is None


def test_cancelled_is_not_failed(cycle5):
    token = CancelToken()
    token.cancel()
    out = run_cancellable(solve_exact, cycle5, token)
    assert out.status == "cancelled"
    assert not out.ok
    assert out.value is None


def test_failed():
    def broken():
        raise ColoringInvariantError("boom")

    out = run_cancellable(broken)
    assert out.status == "failed"
    assert isinstance(out.error, ColoringInvariantError)


def test_submit_solve_and_estimate(two_triangles):
    with ThreadPoolExecutor(max_workers=2) as ex:
        solved = submit_solve(ex, two_triangles).result()
        assert solved.ok
        colors = max(solved.value) + 1
        estimated = submit_estimate(ex, two_triangles, colors, EstimatorConfig(iterations=100)).result()
    assert colors == 3
    assert estimated.ok
    assert estimated.value == 0.0


def test_deadline_cancels_estimate(triangle):
    with ThreadPoolExecutor(max_workers=1) as ex:
        out = submit_estimate(ex, triangle, 3, EstimatorConfig(iterations=100), DeadlineToken(0)).result()
    assert out.status == "cancelled"


def test_token_not_cancelled_by_default():
    assert not CancelToken().cancelled
    assert not DeadlineToken(60).cancelled


def test_submit_named_solver():
    # path a-b-c-d numbered so that first-fit needs a third color
    g = [[2], [3], [0, 3], [2, 1]]
    with ThreadPoolExecutor(max_workers=1) as ex:
        greedy = submit_solve(ex, g, solver="greedy").result()
        exact = submit_solve(ex, g, solver="exact").result()
    assert greedy.value == [0, 0, 1, 2]
    assert max(exact.value) + 1 == 2


def test_submit_unknown_solver():
    with ThreadPoolExecutor(max_workers=1) as ex:
        with pytest.raises(KeyError):
            submit_solve(ex, [[]], solver="dsatur")
