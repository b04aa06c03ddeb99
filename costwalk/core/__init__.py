"""
Costwalk Core: Generic Single-Source Shortest-Path Engine
=========================================================

Dijkstra's algorithm over opaque states and opaque, caller-ordered costs.
The search space is described entirely by three callbacks, so the engine
never stores a graph of its own.

Public API:
- SearchOptions: Callback configuration and entry operations
- PathFinder: One cached search answering many goal queries
- compute_costs: The search loop as a plain function
- resolve_path: Predecessor walk from a goal back to the start
- PriorityFrontier: Min-heap ordered by a caller-supplied ``less``
- NodeCost / CostMap: Finalized records of a run
- NotReachableError / VisitLimitExceeded: Search outcomes
"""

from costwalk.core.schema import Adjacent, CostMap, NodeCost, cost_values
from costwalk.core.frontier import FrontierEntry, PriorityFrontier
from costwalk.core.errors import NotReachableError, SearchError, VisitLimitExceeded
from costwalk.core.engine import compute_costs
from costwalk.core.path import nearest_known_start, resolve_path
from costwalk.core.options import PathFinder, SearchOptions

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
]
