"""
Path Reconstruction
===================

Walks predecessor links of a cost map back from a goal to the start.
"""

import logging
from collections import deque
from typing import Any, Callable, Hashable, Optional

from costwalk.core.errors import NotReachableError
from costwalk.core.schema import CostMap

logger = logging.getLogger(__name__)


def nearest_known_start(
    costs: CostMap,
    less: Callable[[Any, Any], bool],
) -> tuple[Optional[Hashable], bool]:
    """
    Return the cheapest finalized state and whether one exists.

    Among equally cheap states the first one encountered wins.
    """
    best = None
    found = False
    for key, node in costs.items():
        if not found:
            best, found = key, True
        elif less(node.cost, costs[best].cost):
            best = key
    return best, found


def not_reachable(
    costs: CostMap,
    goal: Hashable,
    less: Callable[[Any, Any], bool],
) -> NotReachableError:
    """Build a `NotReachableError` with an inferred start."""
    start, found = nearest_known_start(costs, less)
    return NotReachableError(costs, goal, start=start, starting_unknown=not found)


def resolve_path(
    costs: CostMap,
    goal: Hashable,
    less: Callable[[Any, Any], bool],
) -> list[Hashable]:
    """
    Reconstruct the optimal path from the start to ``goal``.

    Parameters
    ----------
    costs : CostMap
        Output of a search run.
    goal : Hashable
        State to reach.
    less : callable
        Cost ordering, used only to build diagnostics on failure.

    Returns
    -------
    list
        States from start to goal inclusive. ``[start]`` when the goal is
        the start itself.

    Raises
    ------
    NotReachableError
        If ``goal`` was never finalized, or a predecessor link points
        outside the cost map or loops back on itself.
    """
    if goal not in costs:
        logger.debug("Goal %r has no finalized record", goal)
        raise not_reachable(costs, goal, less)

    path = deque([goal])
    current = goal
    while True:
        node = costs.get(current)
        if node is None:
            logger.debug("Predecessor %r of path to %r is missing", current, goal)
            raise not_reachable(costs, goal, less)
        if node.prev is None:
            return list(path)
        # a well-formed map cannot produce a path longer than itself
        if len(path) > len(costs):
            logger.debug("Predecessor links for %r form a cycle", goal)
            raise not_reachable(costs, goal, less)
        current = node.prev
        path.appendleft(current)
