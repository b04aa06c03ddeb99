"""
Pytest configuration and shared fixtures.
"""

import operator

import pytest

from costwalk import GridCell, SearchOptions, parse_grid


# 8 rows x 10 cols of unit cost with four interior walls in column 3
OBSTACLE_GRID = """
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
    1  1  1  ■  1  1  1  1  1  1
    1  1  1  ■  1  1  1  1  1  1
    1  1  1  ■  1  1  1  1  1  1
    1  1  1  ■  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
"""

# (5, 5) is walled in on all four sides
ISOLATED_GRID = """
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
    1  1  1  1  1  ■  1  1  1  1
    1  1  1  1  ■  1  ■  1  1  1
    1  1  1  1  1  ■  1  1  1  1
    1  1  1  1  1  1  1  1  1  1
"""


@pytest.fixture
def obstacle_grid() -> dict[GridCell, int]:
    return parse_grid(OBSTACLE_GRID)


@pytest.fixture
def isolated_grid() -> dict[GridCell, int]:
    return parse_grid(ISOLATED_GRID)


@pytest.fixture
def weighted_edges() -> dict[tuple[str, str], int]:
    """
    Small directed graph:

        a --1--> b --2--> d
        |        ^        ^
        4        1        |
        v        |        |
        c -------+---7----+

    Shortest costs from a: a=0, b=1, c=4, d=3.
    """
    return {
        ("a", "b"): 1,
        ("a", "c"): 4,
        ("c", "b"): 1,
        ("b", "d"): 2,
        ("c", "d"): 7,
    }


@pytest.fixture
def weighted_options(weighted_edges) -> SearchOptions:
    """Additive options over ``weighted_edges``."""

    def accumulate(agg, u, v):
        step = weighted_edges.get((u, v))
        if step is None:
            return agg, False
        return agg + step, True

    def edges(node):
        return [v for (u, v) in weighted_edges if u == node]

    return SearchOptions(accumulate=accumulate, less=operator.lt, edges=edges)
