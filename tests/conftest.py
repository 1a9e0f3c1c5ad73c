"""Shared small graphs with known chromatic numbers."""
import pytest

from colorpuzzle.graphs.graph import make_graph


@pytest.fixture
def triangle():
    return make_graph(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def path4():
    return make_graph(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def cycle5():
    return make_graph(5, [(i, (i + 1) % 5) for i in range(5)])


@pytest.fixture
def two_triangles():
    return make_graph(6, [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)])


@pytest.fixture
def triangle_with_tail():
    # triangle 0-1-2, then a tail 2-3-4
    return make_graph(5, [(0, 1), (1, 2), (0, 2), (2, 3), (3, 4)])
