"""
Costwalk
========

Single-source shortest paths over caller-defined states, costs and
neighbourhoods.

Example
-------
>>> from costwalk import parse_grid, grid_options, GridCell
>>> grid = parse_grid('''
...     1  1  1
...     ■  ■  1
...     1  1  1
... ''')
>>> finder = grid_options(grid).create_path_finder(GridCell(0, 0), 0)
>>> len(finder(GridCell(2, 0))) - 1
6
"""

from costwalk.core import (
    Adjacent,
    CostMap,
    FrontierEntry,
    NodeCost,
    NotReachableError,
    PathFinder,
    PriorityFrontier,
    SearchError,
    SearchOptions,
    VisitLimitExceeded,
    compute_costs,
    cost_values,
    nearest_known_start,
    resolve_path,
)
from costwalk.grid import GridCell, grid_options, parse_grid, render_grid
from costwalk.graphs import options_from_graph

__version__ = "0.1.0"

__all__ = [
    "SearchOptions",
    "PathFinder",
    "compute_costs",
    "resolve_path",
    "nearest_known_start",
    "PriorityFrontier",
    "FrontierEntry",
    "NodeCost",
    "CostMap",
    "Adjacent",
    "cost_values",
    "SearchError",
    "NotReachableError",
    "VisitLimitExceeded",
    "GridCell",
    "parse_grid",
    "render_grid",
    "grid_options",
    "options_from_graph",
]
