"""
Run the solver or the estimator off the calling thread.

Both are long CPU loops with cooperative cancellation (see cancellation.py).
Results come back as an Outcome so callers can tell "cancelled" apart from
"failed" without catching exceptions themselves.
"""
from __future__ import annotations
import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from colorpuzzle.errors import Cancelled
from colorpuzzle.registry import SOLVERS
from colorpuzzle.cancellation import Token
from colorpuzzle.graphs.graph import Graph
import colorpuzzle.coloring  # registers solvers
from colorpuzzle.complexity.estimator import EstimatorConfig, estimate_with_config

log = logging.getLogger(__name__)

Status = Literal["done", "cancelled", "failed"]


@dataclass
class Outcome:
    status: Status
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == "done"


def run_cancellable(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    try:
        return Outcome("done", fn(*args, **kwargs))
    except Cancelled as e:
        log.info("%s cancelled: %s", getattr(fn, "__name__", fn), e)
        return Outcome("cancelled", error=e)
    except Exception as e:
        log.exception("%s failed", getattr(fn, "__name__", fn))
        return Outcome("failed", error=e)


def submit_solve(
    executor: Executor,
    graph: Graph,
    token: Optional[Token] = None,
    solver: str = "exact",
) -> "Future[Outcome]":
    """`solver` names an entry of SOLVERS; unknown names raise KeyError before submitting."""
    fn = SOLVERS.get(solver)
    return executor.submit(run_cancellable, fn, graph, token)


def submit_estimate(
    executor: Executor,
    graph: Graph,
    optimal: int,
    cfg: Optional[EstimatorConfig] = None,
    token: Optional[Token] = None,
) -> "Future[Outcome]":
    return executor.submit(run_cancellable, estimate_with_config, graph, optimal, cfg or EstimatorConfig(), token)
